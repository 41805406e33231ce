# Animation cadence (milliseconds).
TICK_PERIOD_MS = 15
# Largest elapsed time a single advance may integrate over. Longer gaps (window
# minimised, debugger pause) are truncated to this step.
MAX_STEP_MS = 50

# Per-axis distance from the target at which a point counts as arrived.
ARRIVAL_TOLERANCE = 0.1

# Spring model.
SPRING_STIFFNESS = 0.5
SPRING_VISCOSITY = 0.9
# Extra inset (on top of the stroke width) for the spring variant's expanded outline.
SPRING_OUTER_EXTRA = 20.0

# Clamped-linear model (units per millisecond).
LINEAR_SPEED = 0.3
LINEAR_OUTER_EXTRA = 0.0

# Border paint.
BORDER_COLOR = (0x33, 0xB5, 0xE5, 0xFF)
BORDER_STROKE = 4.0

# Closed rectangle outline: four corners plus the repeated first corner.
OUTLINE_POINT_COUNT = 5

# Demo window.
WINDOW_WIDTH = 640
WINDOW_HEIGHT = 360
WINDOW_TITLE = "Expanding Border"
BUTTON_WIDTH = 200
BUTTON_HEIGHT = 120
BUTTON_PADDING = 24
BUTTON_GAP = 60
