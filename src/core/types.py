"""Core types and enums.

TIER 0: No internal imports, only Python stdlib.
"""

from enum import Enum


class BodyType(str, Enum):
    """Request body content types known to the plugin."""

    JSON = "application/json"
    FORM_URLENCODED = "application/x-www-form-urlencoded"
    MULTIPART = "multipart/form-data"
    GRAPHQL = "graphql"
    TEXT = "text/plain"


class RenderPurpose(str, Enum):
    """Why a request is being rendered."""

    SEND = "send"
    PREVIEW = "preview"


class ToastColor(str, Enum):
    """Toast colors understood by the host."""

    SUCCESS = "success"
    DANGER = "danger"
    INFO = "info"
    WARNING = "warning"


class ToastIcon(str, Enum):
    """Toast icons understood by the host."""

    CHECK_CIRCLE = "check_circle"
    ALERT_TRIANGLE = "alert_triangle"
    INFO = "info"


# Body types whose text is run through the comment stripper by default
DEFAULT_BODY_TYPES = [BodyType.JSON.value]
