# Настройки: путь к БД и id пользователя из окружения, тема из QSettings

import logging
import os
from dataclasses import dataclass

from notimebuddy.paths import db_path

ACTOR_ENV = "NOTIMEBUDDY_ACTOR_ID"
LOG_LEVEL_ENV = "NOTIMEBUDDY_LOG_LEVEL"

DEFAULT_ACTOR_ID = 123
DEFAULT_THEME = "dark"

ORG_NAME = "NoTimeBuddy"
APP_NAME = "NoTimeBuddy"


@dataclass(frozen=True)
class Config:
    db_path: str
    actor_id: int = DEFAULT_ACTOR_ID
    theme: str = DEFAULT_THEME


def _actor_id_from_env():
    raw = os.getenv(ACTOR_ENV)
    if not raw:
        return DEFAULT_ACTOR_ID
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{ACTOR_ENV} must be an integer, got {raw!r}") from None


def log_level():
    name = (os.getenv(LOG_LEVEL_ENV) or "INFO").upper()
    level = getattr(logging, name, None)
    # неизвестное имя -> INFO
    return level if isinstance(level, int) else logging.INFO


def load_config(settings=None):
    theme = DEFAULT_THEME
    if settings is not None:
        theme = str(settings.value("theme", DEFAULT_THEME) or DEFAULT_THEME)
    return Config(db_path=db_path(), actor_id=_actor_id_from_env(), theme=theme)
