import os

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "billing_test_db"),
}

DEBUG = False
TESTING = True

LOG_LEVEL = "WARNING"
LOG_JSON = False

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))

SETTLEMENT_FETCH_WORKERS = 3
SETTLEMENT_FAILURE_POLICY = "abort"
SETTLEMENT_BILLING_MODELS = ["hourly", "count_based"]
SETTLEMENT_CURRENCY_SYMBOL = "$"
