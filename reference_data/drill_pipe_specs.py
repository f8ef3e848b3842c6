"""
API 5DP - Drill Pipe Body Dimensions
Nominal weights and wall thicknesses for common drill pipe sizes,
and minimum yield strength per drill pipe grade.

Structure: size label -> {od, weights: [{weight (lb/ft), wall (in)}]}
"""

# Size label -> OD (inches) and nominal weights
# Data from API 5DP / API RP 7G pipe body tables
PIPE_SPECS = {
    '4"': {
        "od": 4.0,
        "weights": [
            {"weight": 11.85, "wall": 0.262},
            {"weight": 14.00, "wall": 0.330},
            {"weight": 15.70, "wall": 0.380},
        ],
    },
    '5"': {
        "od": 5.0,
        "weights": [
            {"weight": 16.25, "wall": 0.296},
            {"weight": 19.50, "wall": 0.362},
            {"weight": 25.60, "wall": 0.500},
        ],
    },
    '5 7/8"': {
        "od": 5.875,
        "weights": [
            {"weight": 23.40, "wall": 0.361},
            {"weight": 26.30, "wall": 0.415},
        ],
    },
}

# Drill pipe grades
# Format: Grade: {minimum yield strength (psi)}
GRADE_PROPERTIES = {
    "E-75": {"yield_psi": 75000},
    "X-95": {"yield_psi": 95000},
    "G-105": {"yield_psi": 105000},
    "S-135": {"yield_psi": 135000},
}


def get_pipe_spec(size):
    """
    Get OD and nominal weights for a pipe size.

    Parameters:
    -----------
    size : str
        Size label, e.g. '5"'

    Returns:
    --------
    dict : {'od': float, 'weights': list}
           Returns None if the size is not in the table
    """
    return PIPE_SPECS.get(size)


def get_nominal_weights(size):
    """
    Get available nominal weights (lb/ft) for a pipe size.

    Returns:
    --------
    list : Nominal weights in table order, or None if size is unknown
    """
    spec = get_pipe_spec(size)
    if spec is None:
        return None
    return [w["weight"] for w in spec["weights"]]


def get_wall_for_weight(size, weight, tolerance=0.005):
    """
    Get the wall thickness matching a nominal weight.

    Parameters:
    -----------
    size : str
        Size label
    weight : float
        Nominal weight (lb/ft)
    tolerance : float
        Matching tolerance (lb/ft)

    Returns:
    --------
    float : Wall thickness (inches), or None if no weight matches
    """
    spec = get_pipe_spec(size)
    if spec is None:
        return None
    for w in spec["weights"]:
        if abs(w["weight"] - weight) < tolerance:
            return w["wall"]
    return None


def get_yield_strength(grade):
    """
    Get minimum yield strength (psi) for a grade, or None if unknown.
    """
    props = GRADE_PROPERTIES.get(grade)
    if props is None:
        return None
    return props["yield_psi"]


if __name__ == "__main__":
    print("API 5DP Drill Pipe Table")
    print("=" * 70)

    for size, spec in PIPE_SPECS.items():
        print(f"\n{size} (OD {spec['od']:.3f} in):")
        for w in spec["weights"]:
            print(f"  {w['weight']:>6.2f} lb/ft  ->  wall {w['wall']:.3f} in")

    print("\nGrades:")
    for grade, props in GRADE_PROPERTIES.items():
        print(f"  {grade:<6} {props['yield_psi']:,} psi")
