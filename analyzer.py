"""
Tension-Torque Capacity Analyzer

Validates a drill pipe selection, runs the capacity curve, applies the
safety factor to every point and tabulates raw and derated curves in
display units. Shared by the Streamlit app and the command-line report.
"""

import math
from dataclasses import dataclass, asdict
from typing import Dict, Any, List, Optional

import pandas as pd

import config
from calculations.calcs_curve import CapacityPoint, calculate_tension_curve
from calculations.calcs_geometry import calculate_section_properties
from calculations.calcs_range import generate_torque_range
from calculations.calcs_safety import apply_safety_factor_to_curve
from calculations.calcs_units import TORQUE_UNITS, TENSION_UNITS, convert_torque, convert_tension
from logging_config import get_logger
from reference_data import drill_pipe_specs

logger = get_logger(__name__)

TORQUE_COLUMN = "Torque"
RAW_TENSION_COLUMN = "Max Tension (No SF)"
DERATED_TENSION_COLUMN = "Max Tension (with SF)"

TEXT_FIELDS = ("pipe_size", "grade", "torque_unit", "tension_unit")
NUMERIC_FIELDS = ("nominal_weight", "safety_factor_percent", "step", "max_torque")


class InputValidationError(ValueError):
    """Pipe selection rejected before calculation."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


# -----------------------------------------------------------------------------
# Data classes
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class PipeSelection:
    pipe_size: str  # e.g. '5"'
    nominal_weight: float  # lb/ft
    grade: str = config.DEFAULT_GRADE
    safety_factor_percent: float = config.DEFAULT_SAFETY_FACTOR_PERCENT
    torque_unit: str = config.DEFAULT_TORQUE_UNIT
    tension_unit: str = config.DEFAULT_TENSION_UNIT
    step: float = config.DEFAULT_TORQUE_STEP_FTLB  # ft-lb
    max_torque: float = config.DEFAULT_MAX_TORQUE_FTLB  # ft-lb

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PipeSelection":
        """Build a selection from a scenario dictionary, ignoring unknown keys."""
        for key in ("pipe_size", "nominal_weight"):
            if key not in data:
                raise InputValidationError(f"Missing required field '{key}'", field=key)
        known = {k: v for k, v in data.items() if k in cls.__dataclass_fields__}
        return cls(**known)


# -----------------------------------------------------------------------------
# Analyzer
# -----------------------------------------------------------------------------
class TensionCapacityAnalyzer:
    """Computes raw and derated tension-torque capacity for one pipe selection"""

    def __init__(self, selection: PipeSelection):
        self.selection = selection
        self.validate()

    def validate(self) -> None:
        sel = self.selection

        for name in TEXT_FIELDS:
            value = getattr(sel, name)
            if not isinstance(value, str):
                raise InputValidationError(f"Field '{name}' must be text, got {value!r}", field=name)

        for name in NUMERIC_FIELDS:
            value = getattr(sel, name)
            # bool is an int subclass but never a valid quantity
            if isinstance(value, bool) or not isinstance(value, (int, float)) or not math.isfinite(value):
                raise InputValidationError(f"Field '{name}' must be a number, got {value!r}", field=name)

        spec = drill_pipe_specs.get_pipe_spec(sel.pipe_size)
        if spec is None:
            raise InputValidationError(
                f"Unknown pipe size {sel.pipe_size!r}, expected one of: {', '.join(drill_pipe_specs.PIPE_SPECS)}",
                field="pipe_size",
            )

        wall = drill_pipe_specs.get_wall_for_weight(sel.pipe_size, sel.nominal_weight)
        if wall is None:
            weights = ", ".join(f"{w:.2f}" for w in drill_pipe_specs.get_nominal_weights(sel.pipe_size))
            raise InputValidationError(
                f"No {sel.pipe_size} pipe at {sel.nominal_weight} lb/ft, available: {weights}",
                field="nominal_weight",
            )

        if spec["od"] <= 2 * wall:
            raise InputValidationError(
                f"Wall thickness {wall} in leaves no bore in a {spec['od']} in OD pipe",
                field="nominal_weight",
            )

        if drill_pipe_specs.get_yield_strength(sel.grade) is None:
            raise InputValidationError(
                f"Unknown grade {sel.grade!r}, expected one of: {', '.join(drill_pipe_specs.GRADE_PROPERTIES)}",
                field="grade",
            )

        if not 0 <= sel.safety_factor_percent <= config.MAX_SAFETY_FACTOR_PERCENT:
            raise InputValidationError(
                f"Safety factor must be between 0 and {config.MAX_SAFETY_FACTOR_PERCENT}%, got {sel.safety_factor_percent}",
                field="safety_factor_percent",
            )

        if sel.step <= 0:
            raise InputValidationError(f"Torque step must be positive, got {sel.step}", field="step")

        if sel.max_torque < 0:
            raise InputValidationError(f"Maximum torque must not be negative, got {sel.max_torque}", field="max_torque")

        if sel.torque_unit not in TORQUE_UNITS:
            raise InputValidationError(f"Unknown torque unit {sel.torque_unit!r}", field="torque_unit")

        if sel.tension_unit not in TENSION_UNITS:
            raise InputValidationError(f"Unknown tension unit {sel.tension_unit!r}", field="tension_unit")

    @property
    def od(self) -> float:
        return drill_pipe_specs.get_pipe_spec(self.selection.pipe_size)["od"]

    @property
    def wall(self) -> float:
        return drill_pipe_specs.get_wall_for_weight(self.selection.pipe_size, self.selection.nominal_weight)

    @property
    def yield_psi(self) -> float:
        return drill_pipe_specs.get_yield_strength(self.selection.grade)

    def raw_curve(self) -> List[CapacityPoint]:
        return calculate_tension_curve(
            self.od, self.wall, self.yield_psi,
            step=self.selection.step,
            max_torque=self.selection.max_torque,
        )

    def derated_curve(self, raw: List[CapacityPoint]) -> List[CapacityPoint]:
        return apply_safety_factor_to_curve(raw, self.selection.safety_factor_percent / 100.0)

    def to_dataframe(self, raw: List[CapacityPoint], derated: List[CapacityPoint]) -> pd.DataFrame:
        """Tabulate both curves in the selected display units."""
        sel = self.selection
        return pd.DataFrame({
            TORQUE_COLUMN: [convert_torque(p.torque, sel.torque_unit) for p in raw],
            RAW_TENSION_COLUMN: [convert_tension(p.max_tension, sel.tension_unit) for p in raw],
            DERATED_TENSION_COLUMN: [convert_tension(p.max_tension, sel.tension_unit) for p in derated],
        })

    def run(self) -> Dict[str, Any]:
        """
        Run the full capacity analysis.

        Returns:
        --------
        dict : Dictionary containing:
            - selection: Input selection as a dict
            - od, wall, yield_psi: Resolved pipe body data
            - section: SectionProperties
            - raw_curve: Capacity curve without safety factor
            - derated_curve: Capacity curve with safety factor applied
            - infeasible_samples: Torque samples dropped (torque alone yields the pipe)
            - pure_tension_capacity: Capacity at zero torque (lbf)
            - table: DataFrame of both curves in display units
        """
        sel = self.selection
        section = calculate_section_properties(self.od, self.wall)
        raw = self.raw_curve()
        derated = self.derated_curve(raw)

        sample_count = sum(1 for _ in generate_torque_range(0, sel.max_torque, sel.step))
        infeasible = sample_count - len(raw)

        logger.info(
            "capacity_curve_calculated",
            pipe_size=sel.pipe_size,
            nominal_weight=sel.nominal_weight,
            grade=sel.grade,
            safety_factor_percent=sel.safety_factor_percent,
            points=len(raw),
            infeasible_samples=infeasible,
        )
        if infeasible:
            logger.debug(
                "torque_samples_dropped",
                first_dropped_torque=raw[-1].torque + sel.step if raw else 0,
                max_torque=sel.max_torque,
            )

        return {
            'selection': asdict(sel),
            'od': self.od,
            'wall': self.wall,
            'yield_psi': self.yield_psi,
            'section': section,
            'raw_curve': raw,
            'derated_curve': derated,
            'infeasible_samples': infeasible,
            'pure_tension_capacity': raw[0].max_tension if raw else 0.0,
            'table': self.to_dataframe(raw, derated),
        }
