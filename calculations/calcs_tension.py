"""
Maximum Allowable Tension Under Torsion
Combined axial + torsional yield envelope of a pipe body.

Formula: T_max = A * sqrt(Y^2 - tau^2)

The axial stress and the torsional shear stress share an elliptical yield
envelope. When tau reaches Y the torque alone yields the section and no
tension can be carried.
"""

import math
from typing import Optional

from calculations.calcs_torsion import torsional_stress


def max_tension(area, yield_psi, torque, od, moment_of_inertia) -> Optional[float]:
    """
    Calculate maximum allowable tension at a given torque.

    Parameters:
    -----------
    area : float
        Cross-sectional area (in^2)
    yield_psi : float
        Yield strength (psi)
    torque : float
        Applied torque (ft-lb)
    od : float
        Outer diameter (inches)
    moment_of_inertia : float
        Polar moment of inertia (in^4)

    Returns:
    --------
    float or None : Maximum allowable tension (lbf), or None when the
                    torsional stress alone meets or exceeds yield
    """
    tau = torsional_stress(torque, od, moment_of_inertia)
    inside_root = yield_psi ** 2 - tau ** 2

    if inside_root <= 0:
        return None

    return area * math.sqrt(inside_root)


if __name__ == "__main__":
    print("Maximum Allowable Tension vs Torque")
    print("=" * 70)

    # 4" OD, 0.213" wall, 35 ksi
    A = 2.534
    I = 9.114
    for tq in [0, 5000, 10000, 20000, 1000000]:
        t_max = max_tension(A, 35000, tq, 4.0, I)
        if t_max is None:
            print(f"  Torque: {tq:>9,} ft-lb | Max Tension: --- (torque exceeds yield)")
        else:
            print(f"  Torque: {tq:>9,} ft-lb | Max Tension: {t_max:,.0f} lbf")
