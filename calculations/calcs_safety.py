"""
Safety Factor Derating
Reduces an allowable tension by a fractional operating margin.
"""

from typing import List

from calculations.calcs_curve import CapacityPoint


def apply_safety_factor(tension, safety_factor):
    """
    Apply safety factor (reduce allowable tension).

    Parameters:
    -----------
    tension : float
        Tension (lbf)
    safety_factor : float
        Safety factor as decimal (0.2 for 20% SF)

    Returns:
    --------
    float : Tension with SF applied (lbf), minimum 0
    """
    return max(0.0, tension * (1 - safety_factor))


def apply_safety_factor_to_curve(curve: List[CapacityPoint], safety_factor) -> List[CapacityPoint]:
    """Derate every point of a capacity curve, keeping torque values."""
    return [
        CapacityPoint(torque=point.torque, max_tension=apply_safety_factor(point.max_tension, safety_factor))
        for point in curve
    ]
