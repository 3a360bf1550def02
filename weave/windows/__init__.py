from .main_window import MainWindow
