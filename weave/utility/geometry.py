import math
from typing import Iterable

from PySide6 import QtCore

from ..errors import EmptyRingError


def distance(a: QtCore.QPointF, b: QtCore.QPointF) -> float:
    return math.hypot(b.x() - a.x(), b.y() - a.y())


def angle(a: QtCore.QPointF, b: QtCore.QPointF) -> float:
    '''
    Angle, in radians, of the vector pointing from a to b.
    '''

    return math.atan2(b.y() - a.y(), b.x() - a.x())


def polar(origin: QtCore.QPointF, radius: float, theta: float) -> QtCore.QPointF:
    return QtCore.QPointF(origin.x() + radius * math.cos(theta),
                          origin.y() + radius * math.sin(theta))


def barycenter(points: Iterable[QtCore.QPointF]) -> QtCore.QPointF:
    '''
    Arithmetic mean of a set of points. 

    Raises EmptyRingError when there is nothing to average.
    '''

    sx = sy = 0.0
    n = 0
    for p in points:
        sx += p.x()
        sy += p.y()
        n += 1

    if n == 0:
        raise EmptyRingError("cannot take the barycenter of zero points")

    return QtCore.QPointF(sx / n, sy / n)
