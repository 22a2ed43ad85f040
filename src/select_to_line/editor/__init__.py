"""Editor-facing snapshots.

The PySide6 adapters live in :mod:`select_to_line.editor.qt_bridge` and are
imported explicitly so headless callers never load Qt.
"""

from .snapshot import CursorSnapshot, DocumentSnapshot, LineSource

__all__ = ["CursorSnapshot", "DocumentSnapshot", "LineSource"]
