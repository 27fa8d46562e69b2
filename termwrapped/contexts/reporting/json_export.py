"""
JSON export of a pipeline result.

Machine-readable dump of the statistics and archetypes for scripting:

    {"stats": {...}, "archetype": {...}, "secondary_archetypes": [...], "meta": {...}}
"""

import json
from dataclasses import asdict
from datetime import date, datetime, timedelta
from typing import Any, Dict


def _json_default(value: Any) -> Any:
    """Serialize values the json module does not know."""
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, timedelta):
        return value.total_seconds()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def build_payload(result, version: str) -> Dict[str, Any]:
    """
    Assemble the export structure for a WrappedResult.

    Args:
        result: WrappedResult from run_pipeline()
        version: Tool version for the meta block

    Returns:
        Plain dict ready for json.dumps (top_commands trimmed to result.top_n)
    """
    stats = asdict(result.stats)
    stats["top_commands"] = [asdict(entry) for entry in result.shown_top_commands]

    return {
        "stats": stats,
        "archetype": asdict(result.archetype),
        "secondary_archetypes": [asdict(arch) for arch in result.secondary_archetypes],
        "meta": {
            "parse_time_ms": int(result.parse_time * 1000),
            "version": version,
            "shell": result.dataset.shell,
            "history_path": str(result.dataset.source_path),
            "line_count": result.dataset.line_count,
        },
    }


def to_json(result, version: str, indent: int = 2) -> str:
    """Render a WrappedResult as indented JSON."""
    return json.dumps(build_payload(result, version), indent=indent, default=_json_default)
