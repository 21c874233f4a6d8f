import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

STORE_CONFIG = {
    # workbook | gsheets | memory
    "backend": os.getenv("STORE_BACKEND", "workbook"),
    "workbook_path": os.getenv("WORKBOOK_PATH", "data/housekeeping.xlsx"),
    "spreadsheet_id": os.getenv("SPREADSHEET_ID", ""),
    "credentials_env": "GOOGLE_SERVICE_ACCOUNT_JSON",
}

TIMEZONE = os.getenv("TIMEZONE", "America/New_York")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# In-process daily reset at DAILY_RESET_HOUR:00 local time
ENABLE_SCHEDULER = bool(int(os.getenv("ENABLE_SCHEDULER", "0")))
DAILY_RESET_HOUR = int(os.getenv("DAILY_RESET_HOUR", "0"))
