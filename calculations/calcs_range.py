"""
Torque Sample Generation
"""

from typing import Iterator


def generate_torque_range(start, end, step) -> Iterator[float]:
    """
    Generate values from start to end (inclusive) with the given step.

    Values are computed as start + i * step rather than by repeated addition,
    so the last value does not drift past end for long ranges. The generator
    holds no state between calls; call it again to restart.

    A zero step, or a step pointing away from end, never terminates.

    Parameters:
    -----------
    start : float
        Starting value
    end : float
        Ending value (inclusive)
    step : float
        Increment step

    Yields:
    -------
    float : start, start + step, ... while <= end
    """
    i = 0
    value = start
    while value <= end:
        yield value
        i += 1
        value = start + i * step
