import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "billing_db"),
}

DEBUG = True

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
LOG_JSON = bool(int(os.getenv("LOG_JSON", "0")))

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))

# Concurrent reads per employee (work logs, attendance, leave).
SETTLEMENT_FETCH_WORKERS = int(os.getenv("SETTLEMENT_FETCH_WORKERS", "3"))
# "abort" stops a batch at the first failing employee, "isolate" keeps going.
SETTLEMENT_FAILURE_POLICY = os.getenv("SETTLEMENT_FAILURE_POLICY", "abort")
SETTLEMENT_BILLING_MODELS = os.getenv("SETTLEMENT_BILLING_MODELS", "hourly,count_based").split(",")
SETTLEMENT_CURRENCY_SYMBOL = os.getenv("SETTLEMENT_CURRENCY_SYMBOL", "$")
