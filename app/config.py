import os
from pathlib import Path

from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parent.parent
ENV_FILE = BASE_DIR / ".env"

load_dotenv(ENV_FILE)

MEALDB_BASE_URL = os.environ.get("MEALDB_BASE_URL", "https://www.themealdb.com/api/json/v1/1").rstrip("/")

# Hard cap on lookups per search
MAX_RESULTS = 10

# Seconds; 0 or empty disables the timeout
REQUEST_TIMEOUT = float(os.environ.get("REQUEST_TIMEOUT", "10") or 0) or None

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
