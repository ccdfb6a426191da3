import datetime

import pytest

from notimebuddy.db import init_db
from notimebuddy.repo import MissionRepo


@pytest.fixture()
def db_file(tmp_path):
    return init_db(tmp_path / "db" / "missions.db")


@pytest.fixture()
def repo(db_file):
    return MissionRepo(db_file)


@pytest.fixture()
def today():
    return datetime.date.today()
