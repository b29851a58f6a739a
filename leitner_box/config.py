DEFAULT_BOX_INTERVALS = (1, 2, 7)  # days per box, box 1 first
FIRST_BOX_INTERVAL = 1             # box 1 is always reviewed daily
DEFAULT_ON_FAIL = "first_box"
GRID_OFFSET_DAYS = 1               # grid anchor sits this many days before start
