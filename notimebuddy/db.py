# инициализация Б/Д

import logging
import os
import sqlite3

from notimebuddy.paths import db_path  # db/missions.db рядом с exe

logger = logging.getLogger(__name__)

DDL = """
CREATE TABLE IF NOT EXISTS Mission (
    MissionId INTEGER PRIMARY KEY AUTOINCREMENT,
    UserId INTEGER,
    MissionTitle TEXT,
    MissionDeadline DATETIME,
    IsDeleted BOOLEAN,
    CreateId INTEGER,
    CreateTime DATETIME,
    UpdateId INTEGER,
    UpdateTime DATETIME
);

CREATE INDEX IF NOT EXISTS idx_mission_active ON Mission(IsDeleted, MissionDeadline);
"""


def init_db(path=None) -> str:
    path = str(path or db_path())
    folder = os.path.dirname(path)
    if folder:
        os.makedirs(folder, exist_ok=True)
    conn = sqlite3.connect(path)
    try:
        conn.executescript(DDL)  # выполняем весь DDL разом
        conn.commit()
    finally:
        conn.close()
    logger.info("Mission storage ready at %s", path)
    return path
