import os
BASE_DIR = os.path.abspath(os.path.dirname(__file__))

class Config:
    DEBUG = os.environ.get("FRUITSTAND_DEBUG", "0").lower() in ("1", "true", "yes", "on")
    DATABASE = os.environ.get("FRUITSTAND_DATABASE", os.path.join(BASE_DIR, "sales.db"))

    # Pool de connexions SQLite
    DB_MAX_CONNECTIONS = int(os.environ.get("FRUITSTAND_DB_MAX_CONNECTIONS", "8"))
    DB_STALE_TIMEOUT = int(os.environ.get("FRUITSTAND_DB_STALE_TIMEOUT", "300"))
    DB_POOL_TIMEOUT = float(os.environ.get("FRUITSTAND_DB_POOL_TIMEOUT", "5"))
    DB_BUSY_TIMEOUT_MS = int(os.environ.get("FRUITSTAND_DB_BUSY_TIMEOUT_MS", "5000"))

    LOG_LEVEL = os.environ.get("FRUITSTAND_LOG_LEVEL", "INFO")
    LOG_FILE = os.environ.get("FRUITSTAND_LOG_FILE")

config = Config()
