import logging
import sys

from PySide6 import QtWidgets

from weave.config import settings
from weave.windows import MainWindow

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

if __name__ == '__main__':
    app = QtWidgets.QApplication(sys.argv)
    win = MainWindow()
    win.resize(1100, 750)
    win.show()
    sys.exit(app.exec())
