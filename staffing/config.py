"""
Configuration for the staffing service.

Values come from the environment (optionally a .env file at the project root).
"""

import os
import logging
from pathlib import Path
from dotenv import load_dotenv

project_root = Path(__file__).resolve().parent.parent
env_path = project_root / ".env"
if env_path.exists():
    load_dotenv(env_path)
else:
    load_dotenv()

DATABASE_URL = os.getenv(
    "DATABASE_URL",
    f"sqlite:///{project_root / 'staffing.db'}"
)
DB_ECHO = os.getenv("DB_ECHO", "false").lower() == "true"
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Suggestions attached to each task
MAX_SUGGESTIONS = 3

# Task statuses that count toward an employee's workload
PENDING_STATUSES = ("Pending", "To Do", "In Progress")


def setup_logging(level: str = LOG_LEVEL) -> None:
    """Configure root logging for scripts and the API process."""
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
