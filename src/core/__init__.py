"""Core module - comment stripper, types, errors, models, ports.

TIER 0: No internal imports, only Python stdlib.

Exports:
- Stripper: strip_comments
- Error types: PluginError, ConfigError, RenderError, SendError
- Enums: BodyType, RenderPurpose, ToastColor, ToastIcon
- Models: HttpRequest, HttpResponse, Toast
- Ports: RenderPort, SendPort, NotifyPort, verify_port
"""

from core.errors import ConfigError, PluginError, RenderError, SendError
from core.jsonc import strip_comments
from core.models import HttpRequest, HttpResponse, Toast
from core.ports import NotifyPort, RenderPort, SendPort, verify_port
from core.types import DEFAULT_BODY_TYPES, BodyType, RenderPurpose, ToastColor, ToastIcon

__all__ = [
    "DEFAULT_BODY_TYPES",
    "BodyType",
    "ConfigError",
    "HttpRequest",
    "HttpResponse",
    "NotifyPort",
    "PluginError",
    "RenderError",
    "RenderPurpose",
    "RenderPort",
    "SendError",
    "SendPort",
    "Toast",
    "ToastColor",
    "ToastIcon",
    "strip_comments",
    "verify_port",
]
