"""Smoke tests for the control panel, run on the offscreen Qt platform."""

from __future__ import annotations

import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
QtWidgets = pytest.importorskip("PySide6.QtWidgets")

from weave.components import Main
from weave.mesh.pipeline import StartMeshPlanar, Surface


@pytest.fixture(scope="module")
def qapp():
    app = QtWidgets.QApplication.instance() or QtWidgets.QApplication([])
    yield app


@pytest.fixture
def main(qapp):
    widget = Main()
    yield widget
    widget.deleteLater()


def test_iterations_rebuild_the_mesh(main):
    main.iter_spin.setValue(0)
    assert main.preview.mesh.num_polygons() == 1
    main.iter_spin.setValue(1)
    assert main.preview.mesh.num_polygons() == 5
    assert main.status.text() == "5 polygons, 16 vertices"


def test_grid_seed_from_pick_list(main):
    main.iter_spin.setValue(0)
    main.shape_combo.setCurrentIndex(list(StartMeshPlanar).index(StartMeshPlanar.SQUARE_GRID))
    assert main.preview.mesh.num_polygons() == 9


def test_sphere_surface_shows_nothing(main):
    main.surface_combo.setCurrentIndex(list(Surface).index(Surface.SPHERE))
    assert main.shape_combo.count() == 4
    assert main.preview.mesh is None
    assert "not available" in main.status.text()


def test_seams_toggle(main):
    main.seams_check.setChecked(True)
    assert main.preview.show_seams
