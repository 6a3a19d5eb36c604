"""Request, response and toast models.

TIER 0: No internal imports, only Python stdlib.

Field names follow Python conventions; from_dict()/to_dict() translate
to the host's camelCase JSON shape.
"""

from dataclasses import dataclass, field, replace
from typing import Any

from core.types import ToastColor, ToastIcon


def _headers_from_host(raw: Any) -> dict[str, str]:
    """Normalize host headers (list of name/value pairs or a mapping)."""
    if not raw:
        return {}
    if isinstance(raw, dict):
        return {str(k): str(v) for k, v in raw.items()}

    headers: dict[str, str] = {}
    for item in raw:
        if not isinstance(item, dict) or not item.get("name"):
            continue
        # Host marks disabled headers instead of removing them
        if item.get("enabled", True) is False:
            continue
        headers[str(item["name"])] = str(item.get("value", ""))
    return headers


@dataclass
class HttpRequest:
    """HTTP request as handed over by the host."""

    url: str
    method: str = "GET"
    headers: dict[str, str] = field(default_factory=dict)
    body_type: str | None = None
    body_text: str | None = None
    id: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "HttpRequest":
        """Build a request from the host JSON shape."""
        body = data.get("body") or {}
        body_text = body.get("text") if isinstance(body, dict) else None
        return cls(
            url=str(data.get("url", "")),
            method=str(data.get("method") or "GET").upper(),
            headers=_headers_from_host(data.get("headers")),
            body_type=data.get("bodyType"),
            body_text=body_text,
            id=data.get("id"),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert back to the host JSON shape."""
        data: dict[str, Any] = {
            "url": self.url,
            "method": self.method,
            "headers": [{"name": k, "value": v, "enabled": True} for k, v in self.headers.items()],
            "bodyType": self.body_type,
            "body": {"text": self.body_text} if self.body_text is not None else {},
        }
        if self.id is not None:
            data["id"] = self.id
        return data

    def with_body(self, body_text: str | None) -> "HttpRequest":
        """Return a copy with a different body text."""
        return replace(self, body_text=body_text)


@dataclass
class HttpResponse:
    """HTTP response returned by a sender."""

    status: int
    status_reason: str | None = None
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes = b""
    url: str | None = None

    @property
    def is_success(self) -> bool:
        """Check if status is 2xx."""
        return 200 <= self.status < 300

    @property
    def status_text(self) -> str:
        """Reason phrase, falling back to the numeric status."""
        return self.status_reason or str(self.status)


@dataclass
class Toast:
    """User-facing notification."""

    message: str
    color: ToastColor = ToastColor.INFO
    icon: ToastIcon = ToastIcon.INFO

    def to_dict(self) -> dict[str, str]:
        return {"message": self.message, "color": self.color.value, "icon": self.icon.value}
