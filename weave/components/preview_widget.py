from typing import Optional

from PySide6 import QtCore, QtGui, QtWidgets

from ..constants.colors import MESH_COLOR, SEAM_COLOR, BACKGROUND_COLOR, FRAME_COLOR
from ..mesh.export import fit_to_rect
from ..mesh.model import Mesh
from ..utility.darklight_switch import darklight_from_lightcolor
from .path_builder import build_path, build_seam_path

# World frame the mesh is fitted into before the camera applies pan/zoom.
WORLD_SIZE = 1000.0
WORLD_MARGIN = 20.0


class PreviewWidget(QtWidgets.QWidget):
    '''Pan/zoom canvas stroking the current weave mesh.'''

    def __init__(self):
        super().__init__()
        self.mesh: Optional[Mesh] = None
        self.show_seams = False
        self._mesh_path = QtGui.QPainterPath()
        self._seam_path = QtGui.QPainterPath()
        self.setMinimumWidth(320)

        self.reset_view()
        # Pan interaction
        self._panning = False
        self._last_pos = QtCore.QPoint()

        self.setAttribute(QtCore.Qt.WA_OpaquePaintEvent, True)

    def set_mesh(self, mesh: Optional[Mesh]):
        if self.mesh is not None:
            self.mesh.changed.disconnect(self.rebuild_paths)
        self.mesh = mesh
        if mesh is not None:
            mesh.changed.connect(self.rebuild_paths)
        self.rebuild_paths()

    def set_show_seams(self, on: bool):
        self.show_seams = on
        self.update()

    def rebuild_paths(self):
        if self.mesh is None or not self.mesh.points():
            self._mesh_path = QtGui.QPainterPath()
            self._seam_path = QtGui.QPainterPath()
            self.update()
            return

        # mesh is y-up, screen is y-down
        sx, sy, cx, cy = fit_to_rect(self.mesh, WORLD_SIZE, WORLD_SIZE, WORLD_MARGIN)
        sy = -sy
        cx -= WORLD_SIZE / 2
        cy = WORLD_SIZE / 2 - cy

        self._mesh_path = build_path(self.mesh, sx, sy, cx, cy)
        self._seam_path = build_seam_path(self.mesh, sx, sy, cx, cy)
        self.update()

    def reset_view(self):
        # "Camera" state
        self._init_rect = QtCore.QRectF(-WORLD_SIZE/2, -WORLD_SIZE/2, WORLD_SIZE, WORLD_SIZE)
        self._center = QtCore.QPointF(self._init_rect.center())  # world center
        self._zoom = 1.0                                         # pixels per world unit
        self._view_inited = False
        self._fit_view()
        self.update()

    # --------- Interaction (pan + zoom) ---------
    def mousePressEvent(self, e: QtGui.QMouseEvent):
        if e.button() == QtCore.Qt.LeftButton:
            self._panning = True
            self._last_pos = e.pos()
            self.setCursor(QtCore.Qt.ClosedHandCursor)

    def mouseMoveEvent(self, e: QtGui.QMouseEvent):
        if self._panning and self._zoom != 0:
            delta_px = e.pos() - self._last_pos
            self._last_pos = e.pos()
            self._center -= QtCore.QPointF(delta_px.x()/self._zoom, delta_px.y()/self._zoom)
            self.update()

    def mouseReleaseEvent(self, e: QtGui.QMouseEvent):
        if e.button() == QtCore.Qt.LeftButton:
            self._panning = False
            self.setCursor(QtCore.Qt.ArrowCursor)

    def wheelEvent(self, e: QtGui.QWheelEvent):
        if e.angleDelta().y() == 0:
            return
        factor = 1.15 if e.angleDelta().y() > 0 else 1/1.15
        anchor = self._widget_to_world(e.position())

        # clamp zoom so it never hits zero/NaN
        self._zoom = max(1e-6, min(1e6, self._zoom * factor))

        # keep the world point under the cursor fixed
        tr = self._target_rect()
        self._center = QtCore.QPointF(
            anchor.x() - (e.position().x() - tr.center().x()) / self._zoom,
            anchor.y() - (e.position().y() - tr.center().y()) / self._zoom,
        )
        self.update()

    def resizeEvent(self, e: QtGui.QResizeEvent):
        if not self._view_inited:
            self._fit_view()
        super().resizeEvent(e)

    # --------- Helpers for mapping ---------
    def _fit_view(self):
        target = self._target_rect()
        if target.width() > 0 and target.height() > 0:
            self._zoom = min(target.width()/self._init_rect.width(),
                             target.height()/self._init_rect.height())
            self._view_inited = True

    def _target_rect(self):
        margin = 20
        return self.rect().adjusted(margin, margin, -margin, -margin)

    def _world_to_device_transform(self):
        tr = self._target_rect()
        T = QtGui.QTransform()
        T.translate(tr.center().x(), tr.center().y())
        T.scale(self._zoom, self._zoom)
        T.translate(-self._center.x(), -self._center.y())
        return T

    def _widget_to_world(self, pt: QtCore.QPointF) -> QtCore.QPointF:
        inv, ok = self._world_to_device_transform().inverted()
        return inv.map(pt) if ok else QtCore.QPointF()

    def paintEvent(self, e):
        p = QtGui.QPainter(self)
        p.setRenderHint(QtGui.QPainter.Antialiasing)
        p.fillRect(self.rect(), darklight_from_lightcolor(*BACKGROUND_COLOR))

        tr = self._target_rect()
        p.setPen(QtGui.QPen(darklight_from_lightcolor(*FRAME_COLOR)))
        p.drawRect(tr)

        if tr.isEmpty() or self._mesh_path.isEmpty():
            return

        T = self._world_to_device_transform()

        pen = QtGui.QPen(MESH_COLOR, 1.5)
        pen.setCosmetic(True)
        p.setPen(pen)
        p.setBrush(QtCore.Qt.NoBrush)
        p.drawPath(T.map(self._mesh_path))

        if self.show_seams:
            seam_pen = QtGui.QPen(SEAM_COLOR, 3)
            seam_pen.setCosmetic(True)
            p.setPen(seam_pen)
            p.drawPath(T.map(self._seam_path))
