# Работа с базой данных

import datetime
import logging
import sqlite3
from contextlib import contextmanager

from notimebuddy.errors import StorageError
from notimebuddy.mission import Mission, as_date, format_time
from notimebuddy.paths import db_path

logger = logging.getLogger(__name__)

COLUMNS = (
    "MissionId, UserId, MissionTitle, MissionDeadline, IsDeleted, "
    "CreateId, CreateTime, UpdateId, UpdateTime"
)


class MissionRepo:
    # Соединение на каждую операцию: открыли, одна транзакция, закрыли.
    # Потоки-воркеры никогда не делят один handle.

    def __init__(self, path=None, timeout=5.0):
        self.path = str(path or db_path())
        self.timeout = timeout

    @contextmanager
    def transaction(self):
        try:
            conn = sqlite3.connect(self.path, timeout=self.timeout)
        except sqlite3.Error as exc:
            raise StorageError(f"cannot open {self.path}: {exc}") from exc
        conn.row_factory = sqlite3.Row
        cur = conn.cursor()
        try:
            yield cur
        except sqlite3.Error as exc:
            conn.rollback()
            raise StorageError(str(exc)) from exc
        except Exception:
            conn.rollback()
            raise
        else:
            try:
                conn.commit()
            except sqlite3.Error as exc:
                raise StorageError(str(exc)) from exc
        finally:
            cur.close()
            conn.close()

    def create_mission(self, title, deadline, actor_id):
        now = format_time(datetime.datetime.now())
        actor_id = int(actor_id)
        sql = """
            INSERT INTO Mission(UserId, MissionTitle, MissionDeadline, IsDeleted,
                                CreateId, CreateTime, UpdateId, UpdateTime)
            VALUES (?, ?, ?, 0, ?, ?, ?, ?)
        """
        with self.transaction() as cur:
            cur.execute(sql, (
                actor_id, title, as_date(deadline).isoformat(),
                actor_id, now, actor_id, now,
            ))
            mission_id = cur.lastrowid
        logger.info("Mission %s created by %s: %r due %s", mission_id, actor_id, title, deadline)
        return mission_id

    def list_active_missions(self, user_id=None):
        sql = f"SELECT {COLUMNS} FROM Mission WHERE IsDeleted = 0"
        params = []
        if user_id is not None:
            sql += " AND UserId = ?"
            params.append(int(user_id))
        sql += " ORDER BY MissionDeadline ASC, MissionId ASC"

        with self.transaction() as cur:
            cur.execute(sql, params)
            rows = cur.fetchall()
        logger.debug("Loaded %d active missions", len(rows))
        return [Mission.from_row(r) for r in rows]

    def cancel_mission(self, mission_id, actor_id=None):
        # Трогаем только активную строку: повторная отмена ничего не меняет
        sql = """
            UPDATE Mission
               SET IsDeleted = 1,
                   UpdateId = COALESCE(?, UpdateId),
                   UpdateTime = ?
             WHERE MissionId = ? AND IsDeleted = 0
        """
        actor = None if actor_id is None else int(actor_id)
        with self.transaction() as cur:
            cur.execute(sql, (actor, format_time(datetime.datetime.now()), int(mission_id)))
            changed = cur.rowcount > 0
        if changed:
            logger.info("Mission %s cancelled by %s", mission_id, actor)
        else:
            logger.debug("Mission %s not active, nothing to cancel", mission_id)
        return changed

    def get_mission(self, mission_id):
        with self.transaction() as cur:
            cur.execute(f"SELECT {COLUMNS} FROM Mission WHERE MissionId = ?", (int(mission_id),))
            row = cur.fetchone()
        return Mission.from_row(row) if row else None
