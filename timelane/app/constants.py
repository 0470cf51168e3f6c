"""
Application Constants.
Stores default values for timeline layout, interaction and UI configuration.
"""

# Window Configuration
WINDOW_TITLE = "Timelane - v0.1.0"
DEFAULT_WINDOW_WIDTH = 1280
DEFAULT_WINDOW_HEIGHT = 720
WINDOW_SETTINGS_KEY = "Timelane"
WINDOW_SETTINGS_APP = "Timelane"
SETTINGS_GEOMETRY_KEY = "window_geometry"
SETTINGS_LAST_ITEMS_FILE_KEY = "last_items_file"

# Lane Layout (pixels)
LANE_HEIGHT = 56
LANE_SPACING = 60  # Vertical distance between lane tops
HEADER_HEIGHT = 40  # Month header band
CONTENT_PADDING = 20
TRACK_MIN_WIDTH = 600

# Item Geometry
MIN_WIDTH_FRACTION = 0.03  # Keeps single-day items visible and clickable
HANDLE_WIDTH = 12  # Edge handle hit area for resizing

# Zoom
ZOOM_MIN = 0.5
ZOOM_MAX = 3.0
ZOOM_STEP = 0.25
ZOOM_DEFAULT = 1.0

# Keys
KEY_ENTER = "Enter"
KEY_ESCAPE = "Escape"

# Status Messages
STATUS_EMPTY_TIMELINE = "No items to display."
STATUS_EMPTY_HINT = "Open an items file with File > Open Items."
STATUS_LOAD_FAIL = "Could not load items file!"
STATUS_ERROR_PREFIX = "Error: "

# File Dialog Filters
ITEMS_FILE_FILTER = "Timeline items (*.json)"
