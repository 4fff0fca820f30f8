# defaults.py
# Default layout values and tuning constants used when a script or the
# command line does not override them.

# Layout, in frame units
POSITION = (0, 0)
SIZE = (100, 100)
# (0, 0) means "one pixel per frame unit"
RESOLUTION = (0, 0)
EXPORT = 'export.png'

# Newton's method for root()
NEWTON_ITERATIONS = 25
NEWTON_TOLERANCE = 1e-9

# Upper bound on the number of branches one MultiValue may hold
MAX_BRANCHES = 4096

# RGBA
FOREGROUND = (0, 0, 0, 255)
BACKGROUND = (255, 255, 255, 255)
