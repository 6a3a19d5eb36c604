"""Shared stdin/stdout helpers for event entry points.

TIER 1: May import from core only.
"""

import json
import sys
from typing import Any


def read_hook_input() -> dict[str, Any]:
    """Read and parse hook input from stdin.

    Returns:
        Parsed hook data dict, or empty dict if parsing fails.
    """
    try:
        data = json.load(sys.stdin)
    except json.JSONDecodeError:
        return {}
    return data if isinstance(data, dict) else {}


def read_text_input() -> str:
    """Read all of stdin as text."""
    return sys.stdin.read()


def output_response(response: dict[str, Any]) -> None:
    """Output hook response as JSON.

    Args:
        response: Response dict to output.
    """
    print(json.dumps(response))


def error_response(message: str) -> None:
    """Output a failed response.

    Args:
        message: Error description.
    """
    output_response({"ok": False, "error": message})
