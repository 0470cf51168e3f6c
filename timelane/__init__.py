"""
Timelane.

Lane-packed timeline layout with drag-to-move, drag-to-resize and zoom
interaction for date-ranged items.
"""

__version__ = "0.1.0"
