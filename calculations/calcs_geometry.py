"""
Hollow Circular Section Properties
Geometry of a pipe body from outer diameter and wall thickness.

Formulas:
    ID = OD - 2t
    A  = pi/4 * (OD^2 - ID^2)
    J  = pi/32 * (OD^4 - ID^4)
"""

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class SectionProperties:
    inside_diameter: float  # in
    area: float  # in^2
    moment_of_inertia: float  # in^4 (polar)


def inside_diameter(od, wt):
    """
    Calculate inside diameter from outer diameter and wall thickness.

    No validation is done: a wall thicker than half the OD gives a
    non-positive inside diameter.

    Parameters:
    -----------
    od : float
        Outer diameter (inches)
    wt : float
        Wall thickness (inches)

    Returns:
    --------
    float : Inside diameter (inches)
    """
    return od - 2 * wt


def area(od, id_):
    """
    Calculate cross-sectional (steel) area of a hollow circular section.

    Parameters:
    -----------
    od : float
        Outer diameter (inches)
    id_ : float
        Inside diameter (inches)

    Returns:
    --------
    float : Area (in^2), zero when both diameters are equal
    """
    return math.pi * (od ** 2 - id_ ** 2) / 4


def inertia(od, id_):
    """
    Calculate polar moment of inertia of a hollow circular section.

    Parameters:
    -----------
    od : float
        Outer diameter (inches)
    id_ : float
        Inside diameter (inches)

    Returns:
    --------
    float : Polar moment of inertia (in^4), zero when both diameters are equal
    """
    return math.pi * (od ** 4 - id_ ** 4) / 32


def calculate_section_properties(od, wt) -> SectionProperties:
    """Derive inside diameter, area and polar moment of inertia in one pass."""
    id_ = inside_diameter(od, wt)
    return SectionProperties(
        inside_diameter=id_,
        area=area(od, id_),
        moment_of_inertia=inertia(od, id_),
    )


if __name__ == "__main__":
    print("Hollow Section Properties")
    print("=" * 70)

    for od, wt in [(4.0, 0.330), (5.0, 0.362), (5.875, 0.361)]:
        props = calculate_section_properties(od, wt)
        print(f"\n  OD: {od}\" | WT: {wt}\" | ID: {props.inside_diameter:.3f}\"")
        print(f"  Area:    {props.area:.3f} in^2")
        print(f"  Inertia: {props.moment_of_inertia:.3f} in^4")
