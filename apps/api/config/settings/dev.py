from .base import *

DEBUG = True
ALLOWED_HOSTS = ["*"]

INTERNAL_IPS = [
    "127.0.0.1",
]

# 로컬 개발: DB_NAME 없으면 sqlite
if not os.getenv("DB_NAME"):
    DATABASES = {
        "default": {
            "ENGINE": "django.db.backends.sqlite3",
            "NAME": BASE_DIR / "db.sqlite3",
        }
    }

LOGGING["loggers"] = {
    "academy": {"level": "DEBUG"},
    "apps": {"level": "DEBUG"},
}
