"""
Tension-Torque Capacity Curve
Maximum allowable tension over a range of applied torque for one pipe body.
"""

from dataclasses import dataclass
from typing import List

from calculations.calcs_geometry import calculate_section_properties
from calculations.calcs_range import generate_torque_range
from calculations.calcs_tension import max_tension

DEFAULT_TORQUE_STEP = 500  # ft-lb
DEFAULT_MAX_TORQUE = 80000  # ft-lb


@dataclass(frozen=True)
class CapacityPoint:
    torque: float  # ft-lb
    max_tension: float  # lbf


def calculate_tension_curve(od, wt, yield_psi,
                            step=DEFAULT_TORQUE_STEP,
                            max_torque=DEFAULT_MAX_TORQUE) -> List[CapacityPoint]:
    """
    Calculate the tension curve across a torque range.

    Torques at which the torsional stress alone reaches yield have no
    allowable tension and are left out of the curve.

    Parameters:
    -----------
    od : float
        Outer diameter (inches)
    wt : float
        Wall thickness (inches)
    yield_psi : float
        Yield strength (psi)
    step : float
        Torque increment (ft-lb)
    max_torque : float
        Maximum torque (ft-lb)

    Returns:
    --------
    list of CapacityPoint : Points in ascending torque, the first at zero
                            torque with tension A * Y
    """
    props = calculate_section_properties(od, wt)

    curve = []
    for tq in generate_torque_range(0, max_torque, step):
        t_max = max_tension(props.area, yield_psi, tq, od, props.moment_of_inertia)
        if t_max is not None:
            curve.append(CapacityPoint(torque=tq, max_tension=t_max))
    return curve
