import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

STORE_CONFIG = {
    "backend": os.getenv("STORE_BACKEND", "gsheets"),
    "workbook_path": os.getenv("WORKBOOK_PATH", "data/housekeeping.xlsx"),
    "spreadsheet_id": os.getenv("SPREADSHEET_ID", ""),
    "credentials_env": "GOOGLE_SERVICE_ACCOUNT_JSON",
}

TIMEZONE = os.getenv("TIMEZONE", "America/New_York")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

ENABLE_SCHEDULER = bool(int(os.getenv("ENABLE_SCHEDULER", "1")))
DAILY_RESET_HOUR = int(os.getenv("DAILY_RESET_HOUR", "0"))
