"""
Display Unit Conversions
Internal units are ft-lb for torque and lbf for tension.
"""

TORQUE_UNITS = {
    'kftlb': {'label': 'kft-lb', 'divisor': 1000.0},
    'kNm': {'label': 'kN-m', 'divisor': 737.562},
}

TENSION_UNITS = {
    'klb': {'label': 'klb', 'divisor': 1000.0},
    'mT': {'label': 'metric tons', 'divisor': 2204.62262},
}


def _lookup(units, unit, quantity):
    if unit not in units:
        raise ValueError(f"Unknown {quantity} unit '{unit}', expected one of: {', '.join(units)}")
    return units[unit]


def convert_torque(ftlb, unit):
    """
    Convert torque from ft-lb to a display unit.

    Parameters:
    -----------
    ftlb : float
        Torque (ft-lb)
    unit : str
        'kftlb' for 1000 ft-lb, 'kNm' for kilonewton-meters

    Returns:
    --------
    float : Converted torque
    """
    return ftlb / _lookup(TORQUE_UNITS, unit, 'torque')['divisor']


def convert_tension(lbf, unit):
    """
    Convert tension from lbf to a display unit.

    Parameters:
    -----------
    lbf : float
        Tension (lbf)
    unit : str
        'klb' for 1000 lbf, 'mT' for metric tons

    Returns:
    --------
    float : Converted tension
    """
    return lbf / _lookup(TENSION_UNITS, unit, 'tension')['divisor']


def torque_unit_label(unit):
    return _lookup(TORQUE_UNITS, unit, 'torque')['label']


def tension_unit_label(unit):
    return _lookup(TENSION_UNITS, unit, 'tension')['label']
