from PyQt5 import QtWidgets, QtGui, QtCore


def _apply_common_qss(app: QtWidgets.QApplication, is_dark: bool):
    grid, header_bg, header_fg = ("#404040", "#3b3b3b", "#e0e0e0") if is_dark else ("#d0d0d0", "#f2f2f2", "#202020")
    app.setStyleSheet(f"""
        QTableView {{
            gridline-color: {grid};
            selection-background-color: #2a82da;
            selection-color: white;
        }}
        QHeaderView::section {{
            background-color: {header_bg};
            color: {header_fg};
            padding: 4px;
            border: 0px;
        }}
        QPushButton#SaveButton {{ font-weight: 600; padding: 4px 14px; }}
        QPushButton#CancelMissionButton {{ padding: 2px 8px; }}
    """)


def enable_dark_theme(app: QtWidgets.QApplication):
    QtWidgets.QApplication.setStyle("Fusion")
    palette = QtGui.QPalette()

    window = QtGui.QColor(53, 53, 53)
    text = QtGui.QColor(220, 220, 220)
    highlight = QtGui.QColor(42, 130, 218)

    palette.setColor(QtGui.QPalette.Window, window)
    palette.setColor(QtGui.QPalette.WindowText, text)
    palette.setColor(QtGui.QPalette.Base, QtGui.QColor(45, 45, 45))
    palette.setColor(QtGui.QPalette.AlternateBase, window)
    palette.setColor(QtGui.QPalette.Text, text)
    palette.setColor(QtGui.QPalette.Button, window)
    palette.setColor(QtGui.QPalette.ButtonText, text)
    palette.setColor(QtGui.QPalette.Disabled, QtGui.QPalette.Text, QtGui.QColor(128, 128, 128))
    palette.setColor(QtGui.QPalette.BrightText, QtCore.Qt.red)
    palette.setColor(QtGui.QPalette.Highlight, highlight)
    palette.setColor(QtGui.QPalette.HighlightedText, QtGui.QColor(255, 255, 255))

    app.setPalette(palette)
    _apply_common_qss(app, is_dark=True)


def enable_light_theme(app: QtWidgets.QApplication):
    QtWidgets.QApplication.setStyle("Fusion")
    app.setPalette(app.style().standardPalette())
    _apply_common_qss(app, is_dark=False)


def apply_theme(app: QtWidgets.QApplication, name: str):
    if name == "light":
        enable_light_theme(app)
    else:
        enable_dark_theme(app)
