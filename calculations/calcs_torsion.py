"""
Torsional Shear Stress
Shear stress in the pipe body from applied torque.

Formula: tau = (T * OD) / (0.09167 * J)

T is in ft-lb while OD and J are in inches. 0.09167 is a fixed shape constant.
"""

TORSION_SHAPE_FACTOR = 0.09167


def torsional_stress(torque, od, moment_of_inertia):
    """
    Calculate torsional shear stress from applied torque.

    Linear in torque and inversely proportional to the moment of inertia.
    A zero moment of inertia is not guarded against.

    Parameters:
    -----------
    torque : float
        Applied torque (ft-lb)
    od : float
        Outer diameter (inches)
    moment_of_inertia : float
        Polar moment of inertia (in^4)

    Returns:
    --------
    float : Torsional shear stress (psi)
    """
    return (torque * od) / (TORSION_SHAPE_FACTOR * moment_of_inertia)
