from PySide6 import QtWidgets, QtGui

from ..components import Main

class MainWindow(QtWidgets.QMainWindow):
    def __init__(self):
        super().__init__()

        self.setWindowTitle("Geometric weave generator")

        self.main_widget = Main()
        self.setCentralWidget(self.main_widget)

        menubar = self.menuBar()

        file_menu = menubar.addMenu("File")
        exit_action = QtGui.QAction("Exit", self)
        exit_action.setShortcut("Ctrl+Q")
        exit_action.triggered.connect(self.close)
        file_menu.addAction(exit_action)

        view_menu = menubar.addMenu("View")
        reset_action = QtGui.QAction("Reset View", self)
        reset_action.setShortcut("Ctrl+0")
        reset_action.triggered.connect(self.main_widget.reset_view)
        view_menu.addAction(reset_action)

        seams_action = QtGui.QAction("Show Seams", self)
        seams_action.setCheckable(True)
        seams_action.toggled.connect(self.main_widget.seams_check.setChecked)
        self.main_widget.seams_check.toggled.connect(seams_action.setChecked)
        view_menu.addAction(seams_action)
