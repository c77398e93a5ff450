"""Configuration for the interview coach."""
import os
from pathlib import Path

# Paths
DATA_DIR = Path.home() / ".interview_coach"
DEFAULT_DB_PATH = os.environ.get("INTERVIEW_COACH_DB", str(DATA_DIR / "coach.db"))
CONTENT_DIR = Path(__file__).parent / "content"

# Practice sessions
QUESTIONS_PER_SESSION = 10
GENERAL_CATEGORY = "general"
ANSWER_TIME_LIMIT_SECONDS = 120

# Logging
LOG_LEVEL = os.environ.get("INTERVIEW_COACH_LOG_LEVEL", "WARNING")
