from PySide6 import QtCore, QtGui
from typing import Any

def is_dark_mode() -> bool:
    app = QtGui.QGuiApplication.instance()
    if app is None:
        return False
    return app.styleHints().colorScheme() == QtCore.Qt.ColorScheme.Dark

def darklight_switch(lightmode_object: Any, darkmode_object: Any):
    '''
    Pick between two objects depending on the current color scheme. 
    '''

    return darkmode_object if is_dark_mode() else lightmode_object

def darklight_from_lightcolor(r, g, b, a = 255):

    light_color = QtGui.QColor(r, g, b, a)
    dark_color = QtGui.QColor(255 - r, 255 - g, 255 - b, a)

    return darklight_switch(light_color, dark_color)
