"""Glue between the window and MissionRepo.

Every store call runs in its own StoreWorker thread. Results come back to
the UI thread through queued signals; the list refresh after a write is
started only from the write's completion slot.
"""
import logging

from PyQt5 import QtCore

from notimebuddy.errors import ValidationError
from notimebuddy.mission import validate_mission

logger = logging.getLogger(__name__)

SUCCESS = "Success"
FAILED = "Failed"

MSG_SAVED = "Mission saved successfully."
MSG_SAVE_FAILED = "Failed to save mission."
MSG_CANCEL_FAILED = "Failed to cancel mission."
MSG_LOAD_FAILED = "Failed to load missions."


class StoreWorker(QtCore.QThread):
    """Runs one store call off the UI thread."""
    result_ready = QtCore.pyqtSignal(object)
    error_occurred = QtCore.pyqtSignal(str)

    def __init__(self, name, job, parent=None):
        super().__init__(parent)
        self.name = name
        self.job = job

    def run(self):
        try:
            result = self.job()
        except Exception as e:
            logger.exception("Store operation %s failed", self.name)
            self.error_occurred.emit(str(e))
            return
        self.result_ready.emit(result)


class MissionController(QtCore.QObject):
    missions_loaded = QtCore.pyqtSignal(list)
    notification = QtCore.pyqtSignal(str, str)  # заголовок, текст

    def __init__(self, repo, actor_id, parent=None):
        super().__init__(parent)
        self.repo = repo
        self.actor_id = int(actor_id)
        self._workers = []

    def _start(self, name, job, on_result, on_error):
        worker = StoreWorker(name, job)
        worker.result_ready.connect(on_result)
        worker.error_occurred.connect(on_error)
        worker.finished.connect(self._forget_worker)
        self._workers.append(worker)
        worker.start()
        return worker

    @QtCore.pyqtSlot()
    def _forget_worker(self):
        worker = self.sender()
        if worker in self._workers:
            self._workers.remove(worker)
            worker.deleteLater()

    def busy(self):
        return bool(self._workers)

    def wait_idle(self, msecs=5000):
        for worker in list(self._workers):
            worker.wait(msecs)

    # --- сохранение ---

    def save(self, title, deadline):
        try:
            title, deadline = validate_mission(title, deadline)
        except ValidationError as e:
            self.notification.emit(FAILED, str(e))
            return None
        repo, actor_id = self.repo, self.actor_id
        return self._start(
            "create_mission",
            lambda: repo.create_mission(title, deadline, actor_id),
            self._on_saved,
            self._on_save_failed,
        )

    @QtCore.pyqtSlot(object)
    def _on_saved(self, mission_id):
        self.notification.emit(SUCCESS, MSG_SAVED)
        self.refresh()

    @QtCore.pyqtSlot(str)
    def _on_save_failed(self, error):
        self.notification.emit(FAILED, MSG_SAVE_FAILED)

    # --- отмена ---

    def cancel(self, mission_id):
        repo, actor_id = self.repo, self.actor_id
        return self._start(
            "cancel_mission",
            lambda: repo.cancel_mission(mission_id, actor_id),
            self._on_cancelled,
            self._on_cancel_failed,
        )

    @QtCore.pyqtSlot(object)
    def _on_cancelled(self, changed):
        self.refresh()

    @QtCore.pyqtSlot(str)
    def _on_cancel_failed(self, error):
        self.notification.emit(FAILED, MSG_CANCEL_FAILED)

    # --- список ---

    def refresh(self):
        return self._start(
            "list_active_missions",
            self.repo.list_active_missions,
            self._on_loaded,
            self._on_load_failed,
        )

    @QtCore.pyqtSlot(object)
    def _on_loaded(self, missions):
        self.missions_loaded.emit(list(missions))

    @QtCore.pyqtSlot(str)
    def _on_load_failed(self, error):
        # Таблица остаётся как была
        self.notification.emit(FAILED, MSG_LOAD_FAILED)
