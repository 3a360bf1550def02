from PySide6 import QtCore, QtGui

from ..mesh.export import MOVE, LINE, CLOSE, export_path, export_seams
from ..mesh.model import Mesh


def replay(instructions, path: QtGui.QPainterPath = None) -> QtGui.QPainterPath:
    '''
    Feed move/line/close instructions into a QPainterPath.
    '''

    if path is None:
        path = QtGui.QPainterPath()

    for cmd in instructions:
        if cmd.op == MOVE:
            path.moveTo(QtCore.QPointF(cmd.x, cmd.y))
        elif cmd.op == LINE:
            path.lineTo(QtCore.QPointF(cmd.x, cmd.y))
        elif cmd.op == CLOSE:
            path.closeSubpath()
        else:
            raise ValueError(f"unknown path instruction {cmd.op!r}")
    return path


def build_path(mesh: Mesh, scale_x: float, scale_y: float, cx: float, cy: float) -> QtGui.QPainterPath:
    return replay(export_path(mesh, scale_x, scale_y, cx, cy))


def build_seam_path(mesh: Mesh, scale_x: float, scale_y: float, cx: float, cy: float) -> QtGui.QPainterPath:
    return replay(export_seams(mesh, scale_x, scale_y, cx, cy))
