# Модель таблицы миссий + раскраска строк.

from PyQt5 import QtCore, QtGui
import datetime

from notimebuddy.mission import format_days_left


class MissionTableModel(QtCore.QAbstractTableModel):
    # Ключи полей и заголовки колонок
    COLUMNS = [
        ("title", "Mission"),
        ("deadline", "Deadline"),
        ("days_left", "Days left"),
        ("cancel", ""),  # сюда вью ставит кнопку Cancel
    ]

    def __init__(self, parent=None):
        super().__init__(parent)
        self.rows = []

    def set_missions(self, missions):
        # Список всегда заменяется целиком
        self.beginResetModel()
        self.rows = list(missions)
        self.endResetModel()

    def rowCount(self, parent=QtCore.QModelIndex()):
        return 0 if parent.isValid() else len(self.rows)

    def columnCount(self, parent=QtCore.QModelIndex()):
        return 0 if parent.isValid() else len(self.COLUMNS)

    def column_index(self, key):
        for i, (k, _) in enumerate(self.COLUMNS):
            if k == key:
                return i
        return -1

    def data(self, index, role=QtCore.Qt.DisplayRole):
        if not index.isValid():
            return None

        mission = self.rows[index.row()]
        key = self.COLUMNS[index.column()][0]

        if role == QtCore.Qt.DisplayRole:
            if key == "title":
                return mission.title
            if key == "deadline":
                return mission.deadline.isoformat()
            if key == "days_left":
                return format_days_left(mission.deadline)
            return None

        if role == QtCore.Qt.TextAlignmentRole:
            if key == "days_left":
                return int(QtCore.Qt.AlignRight | QtCore.Qt.AlignVCenter)
            return int(QtCore.Qt.AlignLeft | QtCore.Qt.AlignVCenter)

        if role == QtCore.Qt.ForegroundRole:
            if mission.deadline == datetime.date.today():
                return QtGui.QBrush(QtGui.QColor("green"))

        return None

    def headerData(self, section, orientation, role=QtCore.Qt.DisplayRole):
        if role != QtCore.Qt.DisplayRole:
            return None
        if orientation == QtCore.Qt.Horizontal:
            return self.COLUMNS[section][1]
        return str(section + 1)

    def mission_at_row(self, row):
        return self.rows[row]
