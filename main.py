"""
Drill Pipe Tension-Torque Capacity Report
Command-line report of maximum allowable tension vs. applied torque

For every scenario in the input file:
- Resolves OD, wall thickness and yield strength from the drill pipe tables
- Calculates the capacity curve without safety factor
- Applies the scenario safety factor to every point
- Prints the curve in the scenario display units

Usage:
    python main.py [input_file.json]
"""

import json
import sys

import config
from analyzer import (
    InputValidationError,
    PipeSelection,
    TensionCapacityAnalyzer,
    TORQUE_COLUMN,
    RAW_TENSION_COLUMN,
    DERATED_TENSION_COLUMN,
)
from calculations.calcs_units import torque_unit_label, tension_unit_label
from logging_config import configure_logging, get_logger

logger = get_logger(__name__)


def load_input_data(filename=config.DEFAULT_INPUT_FILE):
    """Load scenarios from JSON configuration file."""
    try:
        with open(filename, 'r') as f:
            data = json.load(f)
        return data
    except FileNotFoundError:
        print(f"Error: Configuration file '{filename}' not found.")
        sys.exit(1)
    except json.JSONDecodeError as e:
        print(f"Error: Invalid JSON in '{filename}': {e}")
        sys.exit(1)


def analyze_scenario(scenario):
    """
    Run the capacity analysis for one scenario.

    Parameters:
    -----------
    scenario : dict
        Scenario entry from the input file

    Returns:
    --------
    dict : Analyzer result (see TensionCapacityAnalyzer.run)
    """
    selection = PipeSelection.from_dict(scenario)
    return TensionCapacityAnalyzer(selection).run()


def print_results(name, result):
    """Print formatted analysis results."""
    sel = result['selection']
    section = result['section']
    tq_label = torque_unit_label(sel['torque_unit'])
    t_label = tension_unit_label(sel['tension_unit'])

    print(f"\nScenario: {name}")
    print("-" * 70)
    print(f"  Pipe:            {sel['pipe_size']} {sel['nominal_weight']:.2f} lb/ft {sel['grade']}")
    print(f"  OD / WT / ID:    {result['od']:.3f} / {result['wall']:.3f} / {section.inside_diameter:.3f} in")
    print(f"  Area:            {section.area:.4f} in²")
    print(f"  Polar Inertia:   {section.moment_of_inertia:.4f} in⁴")
    print(f"  Yield Strength:  {result['yield_psi']:,.0f} psi")
    print(f"  Pure Tension:    {result['pure_tension_capacity']:,.0f} lbf")
    print(f"  Safety Factor:   {sel['safety_factor_percent']}%")

    print(f"\n  {'Torque (' + tq_label + ')':>18} {'No SF (' + t_label + ')':>22} {'With SF (' + t_label + ')':>22}")
    for _, row in result['table'].iterrows():
        print(f"  {row[TORQUE_COLUMN]:>18.2f} {row[RAW_TENSION_COLUMN]:>22.2f} {row[DERATED_TENSION_COLUMN]:>22.2f}")

    if result['infeasible_samples']:
        print(f"\n  {result['infeasible_samples']} torque sample(s) exceed the pure torsional capacity and are omitted.")


def main(argv=None):
    """Main execution function."""
    argv = sys.argv[1:] if argv is None else argv
    configure_logging(config.LOG_LEVEL, format_json=config.LOG_JSON)

    print("\n" + "=" * 70)
    print("DRILL PIPE TENSION-TORQUE CAPACITY")
    print("=" * 70)

    filename = argv[0] if argv else config.DEFAULT_INPUT_FILE
    print(f"\nLoading scenarios from '{filename}'...")
    data = load_input_data(filename)

    scenarios = data.get('scenarios', [])
    print(f"Loaded {len(scenarios)} scenario(s) for analysis.")

    for i, scenario in enumerate(scenarios, 1):
        name = scenario.get('name', f"Scenario {i}")
        try:
            result = analyze_scenario(scenario)
        except InputValidationError as e:
            logger.error("scenario_rejected", scenario=name, field=e.field, error=str(e))
            print(f"Error: Scenario '{name}': {e}")
            sys.exit(1)
        print_results(name, result)

    print("\n" + "=" * 70)
    print("ANALYSIS COMPLETE")
    print("=" * 70)


if __name__ == "__main__":
    main()
