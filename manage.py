#!/usr/bin/env python
"""Django's command-line utility for administrative tasks."""
import os
import sys
from pathlib import Path

from dotenv import load_dotenv


def main():
    BASE_DIR = Path(__file__).resolve().parent

    # apps / academy 두 패키지를 같은 루트에서 import
    if str(BASE_DIR) not in sys.path:
        sys.path.insert(0, str(BASE_DIR))

    load_dotenv(BASE_DIR / ".env")

    os.environ.setdefault(
        "DJANGO_SETTINGS_MODULE",
        "apps.api.config.settings.dev",
    )

    from django.core.management import execute_from_command_line
    execute_from_command_line(sys.argv)


if __name__ == "__main__":
    main()
