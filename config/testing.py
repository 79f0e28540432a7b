import os

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DATABASE_HOST", "localhost"),
    "port": int(os.getenv("DATABASE_PORT", "3306")),
    "user": os.getenv("DATABASE_USER", "root"),
    "password": os.getenv("DATABASE_PASSWORD", "12345"),
    "database": os.getenv("DATABASE_NAME", "campus_test"),
}

SMTP_CONFIG = {
    "host": "localhost",
    "port": 1025,
    "sender": "campus-test@example.com",
}

DEBUG = False
TESTING = True

AUTO_INIT_DB = False
AUTO_SEED_DB = False
