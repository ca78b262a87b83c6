"""Strands layout editor.

This package exposes the public API surface via:

- ``strands.engine.editor.PuzzleEditor``: one authoring session.
- ``strands.engine.placement.PlacementEngine``: the click-to-place rules.
- ``strands.io.exporter`` helpers: the layout file consumed by the renderer.
"""

from .engine.editor import EditorConfig, PuzzleEditor
from .engine.placement import PlacementEngine
from .io.exporter import LayoutExporter, format_layout

__all__ = [
    "EditorConfig",
    "PuzzleEditor",
    "PlacementEngine",
    "LayoutExporter",
    "format_layout",
]

__version__ = "0.1.0"
