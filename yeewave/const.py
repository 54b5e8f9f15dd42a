# Unit-cell grid (dx = dy = 1), vacuum medium
DEFAULT_SIZE = 100
DEFAULT_DT = 0.1
DEFAULT_C = 1.0
DEFAULT_SUBSTEPS = 5

ABSORBING = "absorbing"
REFLECTING = "reflecting"
BOUNDARY_MODES = (ABSORBING, REFLECTING)

# Smallest grid with a non-empty interior
MIN_SIZE = 3
MAX_CELLS = 2**26
