SECRET_KEY = "test-secret"

STORE_CONFIG = {
    "backend": "memory",
}

TIMEZONE = "America/New_York"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

ENABLE_SCHEDULER = False
DAILY_RESET_HOUR = 0
