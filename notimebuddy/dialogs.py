# Модальные уведомления Success / Failed.

from PyQt5 import QtWidgets


def show_notification(parent, title, message):
    box = QtWidgets.QMessageBox(parent)
    box.setWindowTitle(title)
    box.setText(message)
    if title == "Failed":
        box.setIcon(QtWidgets.QMessageBox.Warning)
    else:
        box.setIcon(QtWidgets.QMessageBox.Information)
    box.setStandardButtons(QtWidgets.QMessageBox.Ok)
    return box.exec_()
