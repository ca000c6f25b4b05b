# PATH: apps/api/config/wsgi.py
import os
from pathlib import Path

from dotenv import load_dotenv
from django.core.wsgi import get_wsgi_application

# 컨테이너는 env 주입, 로컬 실행은 루트 .env
load_dotenv(Path(__file__).resolve().parents[3] / ".env")

os.environ.setdefault(
    "DJANGO_SETTINGS_MODULE",
    "apps.api.config.settings.prod",
)

application = get_wsgi_application()
