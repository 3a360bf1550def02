# Qt widgets and the renderer-side path adapter used by the main GUI

from .path_builder import build_path, build_seam_path
from .preview_widget import PreviewWidget
from .main import Main
