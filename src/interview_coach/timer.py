"""Per-question answer timer: countdown display, colour bands and points."""
from interview_coach.config import ANSWER_TIME_LIMIT_SECONDS


def seconds_left(elapsed: float, limit: int = ANSWER_TIME_LIMIT_SECONDS) -> int:
    return max(0, min(limit, limit - int(elapsed)))


def format_time(seconds: int) -> str:
    mins, secs = divmod(max(0, int(seconds)), 60)
    return f"{mins}:{secs:02d}"


def get_timer_color(seconds: int) -> str:
    if seconds > 60:
        return "green"
    elif seconds > 30:
        return "yellow"
    return "red"


def points_for_time_left(seconds: int) -> int:
    """Points for answering with ``seconds`` left on the clock."""
    if seconds > 60:
        return 100
    elif seconds > 30:
        return 75
    return 50
