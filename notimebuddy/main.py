import logging
import sys

from PyQt5 import QtCore, QtWidgets

from notimebuddy.config import APP_NAME, ORG_NAME, load_config, log_level
from notimebuddy.controller import MissionController
from notimebuddy.db import init_db
from notimebuddy.repo import MissionRepo
from notimebuddy.theme import apply_theme
from notimebuddy.views import MainWindow

# Включаем HiDPI ДО создания QApplication
QtWidgets.QApplication.setAttribute(QtCore.Qt.AA_EnableHighDpiScaling, True)
QtWidgets.QApplication.setAttribute(QtCore.Qt.AA_UseHighDpiPixmaps, True)

logger = logging.getLogger(__name__)


def setup_logging():
    logging.basicConfig(
        level=log_level(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main():
    setup_logging()

    app = QtWidgets.QApplication(sys.argv)
    app.setQuitOnLastWindowClosed(True)

    settings = QtCore.QSettings(ORG_NAME, APP_NAME)
    config = load_config(settings)
    apply_theme(app, config.theme)

    # Без базы работать нечем: ошибки файловой системы здесь фатальны
    init_db(config.db_path)
    repo = MissionRepo(config.db_path)
    controller = MissionController(repo, config.actor_id)
    logger.info("Starting with database %s, actor %s", config.db_path, config.actor_id)

    win = MainWindow(controller)
    win.show()
    controller.refresh()
    sys.exit(app.exec_())


if __name__ == "__main__":
    main()
