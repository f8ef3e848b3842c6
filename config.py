"""
Application constants and defaults for the tension-torque capacity tools.

Log settings can be overridden through the environment:
    TENSION_APP_LOG_LEVEL  (DEBUG, INFO, WARNING, ...; default INFO)
    TENSION_APP_LOG_JSON   (1/true/yes for JSON log lines)
"""

import os
from pathlib import Path

# -----------------------------------------------------------------------------
# Calculation defaults
# -----------------------------------------------------------------------------
DEFAULT_TORQUE_STEP_FTLB = 500
DEFAULT_MAX_TORQUE_FTLB = 80000

DEFAULT_SAFETY_FACTOR_PERCENT = 20
MAX_SAFETY_FACTOR_PERCENT = 90
SAFETY_FACTOR_OPTIONS = list(range(0, MAX_SAFETY_FACTOR_PERCENT + 1, 5))

DEFAULT_GRADE = "E-75"
DEFAULT_TORQUE_UNIT = "kftlb"
DEFAULT_TENSION_UNIT = "klb"

# -----------------------------------------------------------------------------
# Presentation
# -----------------------------------------------------------------------------
COLOR_PRIMARY = "#1e3a8a"
COLOR_RAW_CURVE = "#9333ea"
COLOR_DERATED_CURVE = "#2563eb"
COLOR_SUCCESS = "#10b981"
COLOR_ALERT = "#ef4444"

# -----------------------------------------------------------------------------
# Paths
# -----------------------------------------------------------------------------
PROJECT_ROOT = Path(__file__).parent
DEFAULT_INPUT_FILE = PROJECT_ROOT / "reference_data" / "input_data.json"

# -----------------------------------------------------------------------------
# Logging
# -----------------------------------------------------------------------------
LOG_LEVEL = os.environ.get("TENSION_APP_LOG_LEVEL", "INFO")
LOG_JSON = os.environ.get("TENSION_APP_LOG_JSON", "").lower() in ("1", "true", "yes")
