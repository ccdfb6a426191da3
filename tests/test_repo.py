import datetime

import pytest

from notimebuddy.db import init_db
from notimebuddy.errors import StorageError
from notimebuddy.repo import MissionRepo

ACTOR = 123


def test_create_then_list_round_trip(repo) -> None:
    deadline = datetime.date(2025, 1, 10)
    mission_id = repo.create_mission("Ship report", deadline, ACTOR)

    missions = repo.list_active_missions()
    assert len(missions) == 1
    m = missions[0]
    assert m.mission_id == mission_id
    assert m.title == "Ship report"
    assert m.deadline == deadline
    assert m.is_deleted is False
    assert m.user_id == m.create_id == m.update_id == ACTOR
    assert m.create_time == m.update_time
    assert isinstance(m.create_time, datetime.datetime)


def test_create_assigns_fresh_ids(repo, today) -> None:
    first = repo.create_mission("a", today, ACTOR)
    second = repo.create_mission("a", today, ACTOR)
    assert first != second
    assert len(repo.list_active_missions()) == 2


def test_create_accepts_datetime_deadline(repo) -> None:
    repo.create_mission("t", datetime.datetime(2030, 5, 1, 18, 30), ACTOR)
    assert repo.list_active_missions()[0].deadline == datetime.date(2030, 5, 1)


def test_list_is_sorted_by_deadline(repo, today) -> None:
    later = repo.create_mission("later", today + datetime.timedelta(days=10), ACTOR)
    soon = repo.create_mission("soon", today, ACTOR)
    mid = repo.create_mission("mid", today + datetime.timedelta(days=3), ACTOR)
    same_day = repo.create_mission("mid too", today + datetime.timedelta(days=3), ACTOR)

    ids = [m.mission_id for m in repo.list_active_missions()]
    assert ids == [soon, mid, same_day, later]


def test_list_filters_by_user(repo, today) -> None:
    repo.create_mission("mine", today, ACTOR)
    repo.create_mission("theirs", today, 7)
    assert [m.title for m in repo.list_active_missions(user_id=7)] == ["theirs"]


def test_cancel_hides_mission_but_keeps_row(repo, today) -> None:
    keep = repo.create_mission("keep", today, ACTOR)
    gone = repo.create_mission("gone", today, ACTOR)

    assert repo.cancel_mission(gone, actor_id=42) is True

    assert [m.mission_id for m in repo.list_active_missions()] == [keep]
    row = repo.get_mission(gone)
    assert row is not None
    assert row.is_deleted is True
    assert row.update_id == 42
    assert row.create_id == ACTOR


def test_cancel_without_actor_keeps_update_id(repo, today) -> None:
    mission_id = repo.create_mission("x", today, ACTOR)
    repo.cancel_mission(mission_id)
    assert repo.get_mission(mission_id).update_id == ACTOR


def test_cancel_twice_is_idempotent(repo, today) -> None:
    mission_id = repo.create_mission("x", today, ACTOR)
    assert repo.cancel_mission(mission_id, ACTOR) is True
    once = repo.get_mission(mission_id)

    assert repo.cancel_mission(mission_id, 99) is False
    assert repo.get_mission(mission_id) == once


def test_cancel_unknown_id_is_noop(repo, today) -> None:
    repo.create_mission("x", today, ACTOR)
    before = repo.list_active_missions()
    assert repo.cancel_mission(9999) is False
    assert repo.list_active_missions() == before


def test_get_missing_mission(repo) -> None:
    assert repo.get_mission(1) is None


def test_missing_table_raises_storage_error(tmp_path, today) -> None:
    repo = MissionRepo(tmp_path / "empty.db")
    with pytest.raises(StorageError):
        repo.create_mission("x", today, ACTOR)
    with pytest.raises(StorageError):
        repo.list_active_missions()
    with pytest.raises(StorageError):
        repo.cancel_mission(1)


def test_unopenable_path_raises_storage_error(tmp_path) -> None:
    repo = MissionRepo(tmp_path / "no" / "such" / "dir" / "missions.db")
    with pytest.raises(StorageError) as info:
        repo.list_active_missions()
    assert info.value.__cause__ is not None


def test_failed_insert_leaves_storage_untouched(repo, today) -> None:
    repo.create_mission("ok", today, ACTOR)
    with pytest.raises(ValueError):
        repo.create_mission("bad", today, "not a number")
    assert [m.title for m in repo.list_active_missions()] == ["ok"]


def test_separate_repos_share_file(db_file, today) -> None:
    MissionRepo(db_file).create_mission("x", today, ACTOR)
    init_db(db_file)
    assert len(MissionRepo(db_file).list_active_missions()) == 1
