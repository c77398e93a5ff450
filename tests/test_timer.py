# tests/test_timer.py
from interview_coach.timer import seconds_left, format_time, get_timer_color, points_for_time_left


def test_seconds_left_counts_down():
    assert seconds_left(0) == 120
    assert seconds_left(45.7) == 75
    assert seconds_left(500) == 0


def test_seconds_left_custom_limit():
    assert seconds_left(10, limit=30) == 20


def test_format_time():
    assert format_time(120) == "2:00"
    assert format_time(75) == "1:15"
    assert format_time(9) == "0:09"
    assert format_time(0) == "0:00"


def test_timer_color_bands():
    assert get_timer_color(120) == "green"
    assert get_timer_color(61) == "green"
    assert get_timer_color(60) == "yellow"
    assert get_timer_color(31) == "yellow"
    assert get_timer_color(30) == "red"
    assert get_timer_color(0) == "red"


def test_points_for_time_left():
    """Faster answers earn more points."""
    assert points_for_time_left(100) == 100
    assert points_for_time_left(60) == 75
    assert points_for_time_left(31) == 75
    assert points_for_time_left(30) == 50
    assert points_for_time_left(0) == 50
