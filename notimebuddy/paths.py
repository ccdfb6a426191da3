import os
import sys
from pathlib import Path

APP_NAME = "NoTimeBuddy"
DB_ENV = "NOTIMEBUDDY_DB"


def app_dir() -> str:
    # В сборке PyInstaller база лежит рядом с exe, а не в _MEIPASS
    if getattr(sys, "frozen", False):
        return os.path.dirname(os.path.abspath(sys.executable))
    # В режиме разработки - корень проекта (папка, где лежит notimebuddy/)
    return str(Path(__file__).resolve().parents[1])


def db_path() -> str:
    override = os.getenv(DB_ENV)
    if override:
        return override
    return os.path.join(app_dir(), "db", "missions.db")
