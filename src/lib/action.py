"""The "Send (Strip Comments)" request action.

TIER 1: May import from core only.

Flow: render the request, strip comments from a JSON body, send it,
then report the outcome as a toast. Only the stripping step touches
the body; everything else goes through injected ports.
"""

from collections.abc import Iterable

from core.jsonc import strip_comments
from core.models import HttpRequest, HttpResponse, Toast
from core.ports import NotifyPort, RenderPort, SendPort
from core.types import DEFAULT_BODY_TYPES, RenderPurpose, ToastColor, ToastIcon
from lib.logger import get_logger

logger = get_logger("action")


def should_process_body(body_type: str | None, allowed: Iterable[str] | None = None) -> bool:
    """Check if the body type is eligible for comment stripping.

    Args:
        body_type: Declared body content type of the request.
        allowed: Eligible body types (default: application/json only).

    Returns:
        True if the body should be stripped.
    """
    if not body_type:
        return False
    allowed_types = DEFAULT_BODY_TYPES if allowed is None else list(allowed)
    return body_type in allowed_types


def strip_request_body(request: HttpRequest, allowed: Iterable[str] | None = None) -> HttpRequest:
    """Strip comments from the request body if it qualifies.

    Returns:
        A copy with the stripped body, or the same request when the body
        is empty, not eligible, or has no comments.
    """
    if not request.body_text or not should_process_body(request.body_type, allowed):
        return request

    stripped = strip_comments(request.body_text)
    if stripped == request.body_text:
        return request

    logger.debug("Stripped %d characters of comments", len(request.body_text) - len(stripped))
    return request.with_body(stripped)


def response_toast(response: HttpResponse) -> Toast:
    """Build the toast reporting a response status."""
    if response.is_success:
        return Toast(
            message=f"{response.status} {response.status_text}",
            color=ToastColor.SUCCESS,
            icon=ToastIcon.CHECK_CIRCLE,
        )
    return Toast(
        message=f"{response.status} {response.status_text}",
        color=ToastColor.DANGER,
        icon=ToastIcon.ALERT_TRIANGLE,
    )


def error_toast(error: BaseException) -> Toast:
    """Build the toast reporting a failed render or send."""
    return Toast(
        message=f"Failed to send request: {error}",
        color=ToastColor.DANGER,
        icon=ToastIcon.ALERT_TRIANGLE,
    )


def send_stripped(
    request: HttpRequest,
    renderer: RenderPort,
    sender: SendPort,
    notifier: NotifyPort,
    allowed: Iterable[str] | None = None,
) -> HttpResponse | None:
    """Render, strip, send and notify.

    Args:
        request: Request as stored by the host (templates unresolved).
        renderer: Resolves template variables.
        sender: Transmits the rendered request.
        notifier: Reports the outcome.
        allowed: Body types eligible for stripping.

    Returns:
        The response, or None if rendering or sending failed (the failure
        is reported through the notifier).
    """
    try:
        rendered = renderer.render(request, RenderPurpose.SEND)
        rendered = strip_request_body(rendered, allowed)
        response = sender.send(rendered)
    except Exception as e:
        logger.exception("Request %s %s failed", request.method, request.url)
        notifier.show(error_toast(e))
        return None

    notifier.show(response_toast(response))
    return response
