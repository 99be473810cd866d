# Re-export layout and math helpers for convenience
from .grid import Grid
from .helper import Helper, map_range
from .log import setup_default_logging
