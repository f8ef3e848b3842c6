"""
Calculation modules for drill pipe combined tension-torsion capacity

This package contains the capacity engine:
- calcs_geometry: Inside diameter, area and polar moment of inertia
- calcs_torsion: Torsional shear stress from applied torque
- calcs_tension: Maximum allowable tension under torque (yield envelope)
- calcs_safety: Safety factor derating
- calcs_range: Torque sample generation
- calcs_curve: Torque vs. maximum tension curve assembly
- calcs_units: Display unit conversions
"""
