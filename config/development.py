import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parents[1]

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DATA_DIR = Path(os.getenv("DATA_DIR", str(BASE_DIR / "assets")))
DATA_CONFIG = {
    "employees_file": os.getenv("EMPLOYEES_FILE", str(DATA_DIR / "AbsenceTracker.json")),
    "codes_file": os.getenv("CODES_FILE", str(DATA_DIR / "AbsenceCodes.json")),
}

HOST = os.getenv("HOST", "127.0.0.1")
PORT = int(os.getenv("PORT", "5173"))

DEBUG = True

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
LOG_FILE = os.getenv("LOG_FILE") or None

WINDOW_TITLE = "Absence Tracker"
WINDOW_WIDTH = 1200
WINDOW_HEIGHT = 800
