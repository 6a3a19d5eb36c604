"""Port interfaces for the request pipeline.

TIER 0: No internal imports, only Python stdlib.

Ports define what the action needs from the host: rendering, sending
and notifying. The comment stripper sits between render and send and
depends on none of them.

Usage:
    # In lib - implement the port
    class TemplateRenderer:
        def render(self, request, purpose):
            ...

    assert verify_port(TemplateRenderer({}), RenderPort)
"""

from typing import Any, Protocol, runtime_checkable

from core.models import HttpRequest, HttpResponse, Toast
from core.types import RenderPurpose


@runtime_checkable
class RenderPort(Protocol):
    """Port for resolving template variables in a request.

    Implemented by: lib.render.TemplateRenderer
    """

    def render(self, request: HttpRequest, purpose: RenderPurpose) -> HttpRequest:
        """Return a fully rendered copy of the request."""
        ...


@runtime_checkable
class SendPort(Protocol):
    """Port for sending a rendered request.

    Implemented by: lib.http.UrllibSender
    """

    def send(self, request: HttpRequest) -> HttpResponse:
        """Send the request and return the response."""
        ...


@runtime_checkable
class NotifyPort(Protocol):
    """Port for user-facing notifications.

    Implemented by: lib.notify.ToastNotifier
    """

    def show(self, toast: Toast) -> None:
        """Show a toast."""
        ...


def verify_port(implementation: Any, port: type) -> bool:
    """Verify that an implementation satisfies a port.

    Args:
        implementation: Object to verify.
        port: Protocol class to check against.

    Returns:
        True if implementation satisfies the port.
    """
    return isinstance(implementation, port)
