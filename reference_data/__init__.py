"""
Reference data for drill pipe tension-torque analysis

This package contains:
- drill_pipe_specs: API 5DP drill pipe sizes, nominal weights and grades
- input_data.json: Sample scenarios for the command-line report
"""
