"""
CLI formatting functions for pattern demo output.

Text is the default and prints each pattern's lines under a heading; json
and yaml render the same data structurally.
"""

import json
from typing import Any, Dict, List

import yaml


def format_output(data: Any, format_type: str) -> str:
    """Format data according to the specified format type."""
    if format_type == "json":
        return json.dumps(data, indent=2, default=str)
    elif format_type == "yaml":
        return yaml.safe_dump(data, default_flow_style=False, sort_keys=False)
    else:
        return format_text_output(data)


def format_text_output(data: Any) -> str:
    """Format data as plain text."""
    if isinstance(data, dict) and "results" in data:
        return format_results_text(data["results"])
    elif isinstance(data, dict) and "patterns" in data:
        return "\n".join(data["patterns"])
    else:
        return json.dumps(data, indent=2, default=str)


def format_results_text(results: List[Dict[str, Any]]) -> str:
    blocks = []
    for result in results:
        heading = f"{result['pattern'].title()} Pattern"
        lines = [heading, "-" * len(heading)]
        lines.extend(result["output"])
        blocks.append("\n".join(lines))
    return "\n\n".join(blocks)
