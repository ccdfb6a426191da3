from PyQt5 import QtCore, QtWidgets

from notimebuddy.config import APP_NAME, ORG_NAME
from notimebuddy.dialogs import show_notification
from notimebuddy.models import MissionTableModel
from notimebuddy.theme import enable_dark_theme, enable_light_theme


class MainWindow(QtWidgets.QMainWindow):
    def __init__(self, controller, parent=None):
        super().__init__(parent)
        self.controller = controller
        self.setWindowTitle("No Time Buddy")
        self.resize(640, 480)

        # QSettings
        self.settings = QtCore.QSettings(ORG_NAME, APP_NAME)

        # ===== Действия =====
        self.refresh_act = QtWidgets.QAction("Refresh", self)
        self.refresh_act.setShortcut("F5")
        self.refresh_act.triggered.connect(self.controller.refresh)

        # Тема приложения
        self.act_dark = QtWidgets.QAction("Dark theme", self)
        self.act_dark.setCheckable(True)
        self.act_dark.setChecked(str(self.settings.value("theme", "dark")) == "dark")
        self.act_dark.toggled.connect(self.on_toggle_theme)

        menu = self.menuBar().addMenu("View")
        menu.addAction(self.refresh_act)
        menu.addSeparator()
        menu.addAction(self.act_dark)

        # ===== Форма =====
        self.title_edit = QtWidgets.QLineEdit()
        self.title_edit.setPlaceholderText("Mission title")
        self.title_edit.returnPressed.connect(self.save_mission)

        self.deadline_edit = QtWidgets.QDateEdit(calendarPopup=True)
        self.deadline_edit.setDisplayFormat("yyyy-MM-dd")
        self.deadline_edit.setDate(QtCore.QDate.currentDate())
        self.deadline_edit.setMinimumDate(QtCore.QDate.currentDate())

        self.save_btn = QtWidgets.QPushButton("Save")
        self.save_btn.setObjectName("SaveButton")
        self.save_btn.clicked.connect(self.save_mission)

        form = QtWidgets.QHBoxLayout()
        form.addWidget(self.title_edit, 1)
        form.addWidget(self.deadline_edit)
        form.addWidget(self.save_btn)

        # ===== Таблица =====
        self.model = MissionTableModel(self)
        self.view = QtWidgets.QTableView()
        self.view.setModel(self.model)
        self.view.setSelectionBehavior(QtWidgets.QAbstractItemView.SelectRows)
        self.view.setSelectionMode(QtWidgets.QAbstractItemView.SingleSelection)
        self.view.setEditTriggers(QtWidgets.QAbstractItemView.NoEditTriggers)

        hdr = self.view.horizontalHeader()
        hdr.setSectionResizeMode(self.model.column_index("title"), QtWidgets.QHeaderView.Stretch)
        for key in ("deadline", "days_left", "cancel"):
            hdr.setSectionResizeMode(self.model.column_index(key), QtWidgets.QHeaderView.ResizeToContents)
        self.view.verticalHeader().setVisible(False)

        central = QtWidgets.QWidget()
        lay = QtWidgets.QVBoxLayout(central)
        lay.addLayout(form)
        lay.addWidget(self.view, 1)
        self.setCentralWidget(central)

        # ===== Контроллер =====
        self.controller.missions_loaded.connect(self.show_missions)
        self.controller.notification.connect(self.notify)

        geom = self.settings.value("win/geometry")
        if geom:
            self.restoreGeometry(geom)

    # ===== Миссии =====
    def save_mission(self):
        title = self.title_edit.text()
        deadline = self.deadline_edit.date().toPyDate()
        self.controller.save(title, deadline)

    def cancel_mission(self, mission_id):
        self.controller.cancel(mission_id)

    @QtCore.pyqtSlot(list)
    def show_missions(self, missions):
        self.model.set_missions(missions)
        # После reset модели кнопки надо ставить заново
        col = self.model.column_index("cancel")
        for row in range(self.model.rowCount()):
            mission = self.model.mission_at_row(row)
            btn = QtWidgets.QPushButton("Cancel")
            btn.setObjectName("CancelMissionButton")
            btn.clicked.connect(lambda _checked=False, mid=mission.mission_id: self.cancel_mission(mid))
            self.view.setIndexWidget(self.model.index(row, col), btn)

    @QtCore.pyqtSlot(str, str)
    def notify(self, title, message):
        if title == "Success":
            self.title_edit.clear()
        show_notification(self, title, message)

    # ===== Тема =====
    def on_toggle_theme(self, checked):
        app = QtWidgets.QApplication.instance()
        if not app:
            return
        if checked:
            enable_dark_theme(app)
            self.settings.setValue("theme", "dark")
        else:
            enable_light_theme(app)
            self.settings.setValue("theme", "light")

    # ===== Служебное =====
    def closeEvent(self, e):
        try:
            self.settings.setValue("win/geometry", self.saveGeometry())
            self.settings.sync()
            self.controller.wait_idle()
        finally:
            super().closeEvent(e)
