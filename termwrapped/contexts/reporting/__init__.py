"""
Reporting Context

Responsibilities:
- Renders the styled terminal report
- Exports statistics and archetypes as JSON
- Turns numbers into display labels (sudo level, day names, durations)

Owns: Presentation of results
Never: Computes statistics or reads history files
"""

from termwrapped.contexts.reporting.json_export import build_payload, to_json
from termwrapped.contexts.reporting.terminal_report import render_report

__all__ = ["render_report", "build_payload", "to_json"]
