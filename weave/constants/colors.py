from PySide6 import QtGui

MESH_COLOR = QtGui.QColor('#327986')
SEAM_COLOR = QtGui.QColor('#E3D08D')
BACKGROUND_COLOR = (250, 250, 250)
FRAME_COLOR = (220, 220, 220)
