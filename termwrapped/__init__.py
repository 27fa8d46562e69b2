"""
Terminal Wrapped - your shell history as a developer stats report card

Reads a shell history file once, computes descriptive statistics about the
user's command-line habits and prints a styled report with a playful
"archetype" classification.

Architecture:
- Parsing Context: History file reading, timestamp extraction, tokenization
- Analysis Context: Base-command resolution, statistics, archetype scoring
- Reporting Context: Terminal report, JSON export, display labels
"""

__version__ = "0.1.0"
