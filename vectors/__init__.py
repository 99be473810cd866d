# Re-export the vector API for convenience
from .vector import (
    Vector,
    VectorLike,
)
