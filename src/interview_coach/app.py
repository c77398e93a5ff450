"""Interactive CLI application."""
import time

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.prompt import Prompt, Confirm

from interview_coach.config import DEFAULT_DB_PATH, GENERAL_CATEGORY
from interview_coach.identity import get_install_id
from interview_coach.logging_config import configure_logging
from interview_coach.progress import SessionTracker
from interview_coach.question_bank import get_known_fields
from interview_coach.rate_limiter import RateLimiter, RATE_LIMIT_PRESETS
from interview_coach.storage import SqliteStore
from interview_coach.timer import (
    seconds_left, format_time, get_timer_color, points_for_time_left,
)

console = Console()

DIFFICULTY_COLORS = {"easy": "green", "medium": "yellow", "hard": "red"}
SESSION_RATE_KEY = "practice_sessions"
SESSION_RATE_LIMIT = RATE_LIMIT_PRESETS["API_CALLS"]


def show_welcome():
    console.print(Panel(
        "[bold]Mock Interview Coach[/bold]\n[dim]Timed interview question practice[/dim]",
        title="Welcome", border_style="blue",
    ))


def show_menu():
    console.print("\n[bold]Commands:[/bold]")
    commands = [
        ("general", "General interview practice"),
        ("field", "Field-specific interview practice"),
        ("stats", "Progress across categories"),
        ("reset", "Start a category over"),
        ("quit", "Exit"),
    ]
    for cmd, desc in commands:
        console.print(f"  [cyan]{cmd:<14}[/cyan] {desc}")


def run_interview_session(
    tracker: SessionTracker, category: str, limiter: RateLimiter | None = None,
) -> dict:
    """Walk through the current batch for ``category``.

    Typing ``q`` leaves the session resumable; finishing the last question
    completes it. With a ``limiter``, session starts share the
    ``API_CALLS`` budget.
    """
    if limiter and not limiter.check_rate_limit(SESSION_RATE_KEY, SESSION_RATE_LIMIT):
        wait = limiter.get_time_until_reset(SESSION_RATE_KEY, SESSION_RATE_LIMIT)
        console.print(f"[yellow]Too many sessions started. Try again in {wait // 1000 + 1}s.[/yellow]")
        return {"answered": 0, "points": 0, "completed": False}

    try:
        batch = tracker.get_next_questions(category)
    except Exception as e:
        console.print(f"[red]Failed to load questions. Please try again.[/red] [dim]{e}[/dim]")
        return {"answered": 0, "points": 0, "completed": False}

    by_id = {q.id: q for q in batch.questions}
    session_ids = batch.progress.current_session_questions
    index = batch.progress.current_question_index
    total = len(session_ids)
    if batch.is_resuming_session:
        console.print(f"[cyan]Welcome back! Resuming from question {index + 1} of {total}.[/cyan]")

    answered = 0
    points = 0
    while index < total:
        q = by_id.get(session_ids[index])
        if q is None:
            # Id no longer in the pool: retire it without prompting.
            tracker.mark_question_answered(category, session_ids[index])
            index += 1
            continue
        color = DIFFICULTY_COLORS.get(q.difficulty, "white")
        console.print(Panel(
            q.text,
            title=f"Question {index + 1}/{total}",
            subtitle=f"[{color}]{q.difficulty}[/{color}]",
            border_style="cyan",
        ))
        if q.tips:
            console.print(f"[dim]Tip: {q.tips}[/dim]")
        started = time.monotonic()
        choice = Prompt.ask(
            "[dim]Enter when answered, 's' to skip, 'q' to exit[/dim]",
            default="", show_default=False,
        ).strip().lower()
        if choice == "q":
            console.print("[dim]Progress saved. You can resume from this question later.[/dim]")
            return {"answered": answered, "points": points, "completed": False}

        left = seconds_left(time.monotonic() - started)
        tracker.mark_question_answered(category, q.id)
        if choice == "s":
            console.print("[dim]Skipped. It counts as seen and can come back in a future session.[/dim]\n")
        else:
            earned = points_for_time_left(left)
            points += earned
            answered += 1
            tc = get_timer_color(left)
            console.print(f"[{tc}]{format_time(left)} left[/{tc}]  [bold]+{earned}[/bold] points\n")
        index += 1

    tracker.complete_session(category)
    stats = tracker.get_statistics(category)
    console.print(Panel(
        f"You earned [bold]{points}[/bold] points.\n"
        f"Progress: {stats.asked_questions}/{stats.total_questions} {category} questions practiced "
        f"({stats.percentage_complete}%).",
        title="Session Complete!", border_style="green",
    ))
    return {"answered": answered, "points": points, "completed": True}


def cmd_general(tracker: SessionTracker, limiter: RateLimiter | None = None):
    console.print("\n[bold]General Interview[/bold]")
    run_interview_session(tracker, GENERAL_CATEGORY, limiter)


def cmd_field(tracker: SessionTracker, limiter: RateLimiter | None = None):
    console.print("\n[bold]Field-Specific Interview[/bold]")
    fields = get_known_fields()
    for f in fields:
        console.print(f"  [cyan]-[/cyan] {f}")
    field = Prompt.ask("Field", default=fields[0]).strip()
    run_interview_session(tracker, field or fields[0], limiter)


def cmd_stats(tracker: SessionTracker):
    table = Table(title="Practice Progress")
    table.add_column("Category", style="cyan")
    table.add_column("Practiced", justify="right")
    table.add_column("Remaining", justify="right")
    table.add_column("Complete", justify="right")
    for category in [GENERAL_CATEGORY, *get_known_fields()]:
        stats = tracker.get_statistics(category)
        table.add_row(
            category,
            f"{stats.asked_questions}/{stats.total_questions}",
            str(stats.remaining_questions),
            f"{stats.percentage_complete}%",
        )
    console.print(table)


def cmd_reset(tracker: SessionTracker):
    category = Prompt.ask("Category to reset", default=GENERAL_CATEGORY).strip()
    if Confirm.ask(f"Reset all progress for [bold]{category}[/bold]?", default=False):
        tracker.reset_progress(category)
        console.print(f"[green]Progress for {category} reset.[/green]")


def main():
    configure_logging(console=console)
    store = SqliteStore(DEFAULT_DB_PATH)
    tracker = SessionTracker(store, get_install_id(store))
    limiter = RateLimiter(store)

    show_welcome()

    while True:
        show_menu()
        choice = Prompt.ask("\n[bold]>[/bold]", default="general").strip().lower()
        try:
            if choice == "general":
                cmd_general(tracker, limiter)
            elif choice == "field":
                cmd_field(tracker, limiter)
            elif choice == "stats":
                cmd_stats(tracker)
            elif choice == "reset":
                cmd_reset(tracker)
            elif choice in ("quit", "exit", "q"):
                console.print("[dim]Good luck in your interviews![/dim]")
                break
            else:
                console.print("[red]Unknown command. Try again.[/red]")
        except KeyboardInterrupt:
            console.print("\n[dim]Use 'quit' to exit.[/dim]")
        except Exception as e:
            console.print(f"[red]Error: {e}[/red]")


if __name__ == "__main__":
    main()
