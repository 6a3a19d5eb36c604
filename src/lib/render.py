"""Template rendering for requests.

TIER 1: May import from core only.

Replaces {{var}} placeholders (nested keys as {{env.host}}) in the URL,
header values and body text before the request is stripped and sent.
"""

import json
import re
from dataclasses import replace
from typing import Any

from core.errors import RenderError
from core.models import HttpRequest
from core.types import RenderPurpose
from lib.logger import get_logger

PLACEHOLDER_RE = re.compile(r"\{\{\s*(\w+(?:\.\w+)*)\s*\}\}")

logger = get_logger("render")

_MISSING = object()


def _resolve(values: dict[str, Any], key: str) -> Any:
    value: Any = values
    for part in key.split("."):
        if isinstance(value, dict) and part in value:
            value = value[part]
        else:
            return _MISSING
    return value


def _format_value(value: Any) -> str:
    if isinstance(value, (list, dict)):
        return json.dumps(value)
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return ""
    return str(value)


def render_template(template: str, values: dict[str, Any], strict: bool = True) -> str:
    """Replace {{var}} placeholders with values.

    Args:
        template: Template string with {{var}} placeholders.
        values: Dict of values to substitute.
        strict: Raise on unknown variables instead of rendering "".

    Returns:
        Rendered string with placeholders replaced.

    Raises:
        RenderError: If strict and a variable is not defined.
    """

    def replace_var(match: re.Match) -> str:
        key = match.group(1)
        value = _resolve(values, key)
        if value is _MISSING:
            if strict:
                raise RenderError(f"Undefined variable: {key}")
            return ""
        return _format_value(value)

    return PLACEHOLDER_RE.sub(replace_var, template)


class TemplateRenderer:
    """RenderPort implementation backed by a variables mapping."""

    def __init__(self, variables: dict[str, Any] | None = None, strict: bool = True) -> None:
        self.variables = dict(variables or {})
        self.strict = strict

    def render(self, request: HttpRequest, purpose: RenderPurpose) -> HttpRequest:
        """Return a rendered copy of the request; the input is left untouched."""
        logger.debug("Rendering %s %s for %s", request.method, request.url, purpose.value)

        def r(text: str) -> str:
            return render_template(text, self.variables, strict=self.strict)

        return replace(
            request,
            url=r(request.url),
            headers={name: r(value) for name, value in request.headers.items()},
            body_text=r(request.body_text) if request.body_text is not None else None,
        )
