# Запись миссии, проверка ввода и "осталось дней".

import datetime
from dataclasses import dataclass
from typing import Optional

from notimebuddy.errors import ValidationError

MSG_REQUIRED = "Please enter Mission Title and Deadline."
MSG_PAST_DEADLINE = "Mission Deadline cannot be earlier than today."

TIME_FORMAT = "%Y-%m-%d %H:%M:%S"


def as_date(value):
    # datetime - подкласс date, поэтому проверяем его первым
    if isinstance(value, datetime.datetime):
        return value.date()
    return value


def parse_date(value):
    if isinstance(value, (datetime.date, datetime.datetime)):
        return as_date(value)
    return datetime.date.fromisoformat(str(value)[:10])


def parse_time(value):
    if value is None:
        return None
    if isinstance(value, datetime.datetime):
        return value
    return datetime.datetime.fromisoformat(str(value))


def format_time(value):
    return value.strftime(TIME_FORMAT)


@dataclass
class Mission:
    """Строка таблицы Mission; is_deleted=True после отмены."""
    mission_id: int
    user_id: int
    title: str
    deadline: datetime.date
    is_deleted: bool = False
    create_id: Optional[int] = None
    create_time: Optional[datetime.datetime] = None
    update_id: Optional[int] = None
    update_time: Optional[datetime.datetime] = None

    @classmethod
    def from_row(cls, row):
        return cls(
            mission_id=int(row["MissionId"]),
            user_id=row["UserId"],
            title=row["MissionTitle"],
            deadline=parse_date(row["MissionDeadline"]),
            is_deleted=bool(row["IsDeleted"]),
            create_id=row["CreateId"],
            create_time=parse_time(row["CreateTime"]),
            update_id=row["UpdateId"],
            update_time=parse_time(row["UpdateTime"]),
        )


def validate_mission(title, deadline, today=None):
    # Возвращает очищенные (title, deadline) или бросает ValidationError
    title = (title or "").strip()
    if not title or deadline is None:
        raise ValidationError(MSG_REQUIRED)

    deadline = as_date(deadline)
    today = as_date(today or datetime.date.today())
    if deadline < today:
        raise ValidationError(MSG_PAST_DEADLINE)
    return title, deadline


def days_left(deadline, today=None):
    today = as_date(today or datetime.date.today())
    return (as_date(deadline) - today).days


def format_days_left(deadline, today=None):
    return f"{days_left(deadline, today)} days"
