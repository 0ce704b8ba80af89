import os

SECRET_KEY = "test-secret"

DATA_CONFIG = {
    "employees_file": os.getenv("EMPLOYEES_FILE", "tests/data/AbsenceTracker.json"),
    "codes_file": os.getenv("CODES_FILE", "tests/data/AbsenceCodes.json"),
}

HOST = "127.0.0.1"
PORT = 5174

DEBUG = False
TESTING = True

LOG_LEVEL = "WARNING"
LOG_FILE = None
