import logging

from PySide6 import QtCore, QtWidgets

from ..config import settings
from ..mesh.pipeline import (
    Surface, SeedKind, StartMeshPlanar, StartMeshSpherical, build_mesh, planar_seed,
)
from .preview_widget import PreviewWidget

logger = logging.getLogger(__name__)


class Main(QtWidgets.QWidget):
    '''
    Controls on the left, preview on the right. Any change of surface,
    starting mesh or iteration count rebuilds the mesh from scratch.
    '''

    def __init__(self):
        super().__init__()
        self.setWindowTitle("Geometric weave generator")

        self.surface = Surface.PLANE
        self.start_mesh_planar = settings.default_start_mesh
        self.start_mesh_sphere = StartMeshSpherical.DODECAHEDRON
        self.iterations = min(settings.default_iterations, settings.max_iterations)

        self.preview = PreviewWidget()
        self.status = QtWidgets.QLabel()
        self.status.setWordWrap(True)

        layout = QtWidgets.QHBoxLayout(self)
        layout.setSpacing(50)
        layout.setContentsMargins(20, 20, 20, 20)
        layout.addWidget(self._make_controls())
        layout.addWidget(self.preview, 1)

        self.rebuild()

    def _make_controls(self):
        panel = QtWidgets.QWidget()
        panel.setMaximumWidth(200)
        col = QtWidgets.QVBoxLayout(panel)
        col.setSpacing(20)

        # Surface pick list
        self.surface_combo = QtWidgets.QComboBox()
        for surface in Surface:
            self.surface_combo.addItem(str(surface), surface)
        self.surface_combo.setCurrentIndex(list(Surface).index(self.surface))
        self.surface_combo.currentIndexChanged.connect(self._on_surface_changed)

        # Initial mesh pick list, refilled when the surface changes
        self.shape_combo = QtWidgets.QComboBox()
        self._fill_shape_combo()
        self.shape_combo.currentIndexChanged.connect(self._on_shape_changed)

        # Iterations
        self.iter_spin = QtWidgets.QSpinBox()
        self.iter_spin.setRange(0, settings.max_iterations)
        self.iter_spin.setValue(self.iterations)
        self.iter_spin.valueChanged.connect(self._on_iterations_changed)

        self.seams_check = QtWidgets.QCheckBox("Show seams")
        self.seams_check.toggled.connect(self.preview.set_show_seams)

        for label, widget in (("Surface geometry:", self.surface_combo),
                              ("Initial mesh:", self.shape_combo),
                              ("Iterations", self.iter_spin)):
            box = QtWidgets.QVBoxLayout()
            box.addWidget(QtWidgets.QLabel(label))
            box.addWidget(widget)
            col.addLayout(box)

        col.addWidget(self.seams_check)
        col.addWidget(self.status)
        col.addStretch(1)
        return panel

    def _fill_shape_combo(self):
        self.shape_combo.blockSignals(True)
        self.shape_combo.clear()
        if self.surface is Surface.PLANE:
            options, current = list(StartMeshPlanar), self.start_mesh_planar
        else:
            options, current = list(StartMeshSpherical), self.start_mesh_sphere
        for shape in options:
            self.shape_combo.addItem(str(shape), shape)
        self.shape_combo.setCurrentIndex(options.index(current))
        self.shape_combo.blockSignals(False)

    def _on_surface_changed(self, idx: int):
        self.surface = self.surface_combo.itemData(idx)
        self._fill_shape_combo()
        self.rebuild()

    def _on_shape_changed(self, idx: int):
        shape = self.shape_combo.itemData(idx)
        if self.surface is Surface.PLANE:
            self.start_mesh_planar = shape
        else:
            self.start_mesh_sphere = shape
        self.rebuild()

    def _on_iterations_changed(self, n: int):
        self.iterations = n
        self.rebuild()

    def current_seed(self):
        if self.surface is Surface.SPHERE:
            return SeedKind.SPHERE, {'shape': self.start_mesh_sphere}
        return planar_seed(self.start_mesh_planar, settings.grid_cols, settings.grid_rows)

    def rebuild(self):
        seed_kind, seed_params = self.current_seed()
        try:
            mesh = build_mesh(seed_kind, seed_params, self.iterations)
        except NotImplementedError as e:
            logger.warning("Cannot build mesh: %s", e)
            self.status.setText(str(e))
            self.preview.set_mesh(None)
            return

        logger.info("The mesh has %d polygons.", mesh.num_polygons())
        self.status.setText(f"{mesh.num_polygons()} polygons, {mesh.num_vertices()} vertices")
        self.preview.set_mesh(mesh)

    def reset_view(self):
        self.preview.reset_view()
