import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "billing_db"),
}

DEBUG = False

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_JSON = bool(int(os.getenv("LOG_JSON", "1")))

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))

SETTLEMENT_FETCH_WORKERS = int(os.getenv("SETTLEMENT_FETCH_WORKERS", "3"))
SETTLEMENT_FAILURE_POLICY = os.getenv("SETTLEMENT_FAILURE_POLICY", "abort")
SETTLEMENT_BILLING_MODELS = os.getenv("SETTLEMENT_BILLING_MODELS", "hourly,count_based").split(",")
SETTLEMENT_CURRENCY_SYMBOL = os.getenv("SETTLEMENT_CURRENCY_SYMBOL", "$")
