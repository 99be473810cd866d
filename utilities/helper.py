from __future__ import annotations


def map_range(
    n: float,
    start1: float,
    stop1: float,
    start2: float,
    stop2: float,
    within_bounds: bool = False,
) -> float:
    """
    Re-map `n` from the range [start1, stop1] to [start2, stop2].

    With within_bounds=True the result is clamped to the target range,
    whichever way that range runs.
    """
    if stop1 == start1:
        raise ValueError("input range must not be empty (start1 == stop1)")
    new_val = (n - start1) / (stop1 - start1) * (stop2 - start2) + start2
    if not within_bounds:
        return new_val
    if start2 < stop2:
        return max(min(new_val, stop2), start2)
    return max(min(new_val, start2), stop2)


class Helper:
    map = staticmethod(map_range)
