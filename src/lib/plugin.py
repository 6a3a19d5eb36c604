"""Plugin definition exposed to the host.

TIER 1: May import from core only.

The host lists `http_request_actions` in its request menu and calls
`on_select(ctx, request)` when the user picks one.
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field

from core.models import HttpRequest, HttpResponse
from core.ports import NotifyPort, RenderPort, SendPort
from core.types import DEFAULT_BODY_TYPES, ToastIcon
from lib.action import send_stripped

PLUGIN_NAME = "strip-comments"
DEFAULT_LABEL = "Send (Strip Comments)"
DEFAULT_ICON = ToastIcon.CHECK_CIRCLE.value


@dataclass
class PluginContext:
    """Host capabilities handed to an action."""

    renderer: RenderPort
    sender: SendPort
    notifier: NotifyPort


ActionHandler = Callable[[PluginContext, HttpRequest], HttpResponse | None]


@dataclass
class HttpRequestAction:
    """Entry in the host's request action menu."""

    label: str
    icon: str
    on_select: ActionHandler


@dataclass
class PluginDefinition:
    """Everything the plugin registers with the host."""

    name: str
    http_request_actions: list[HttpRequestAction] = field(default_factory=list)

    def find_action(self, label: str) -> HttpRequestAction | None:
        """Look up an action by label."""
        for action in self.http_request_actions:
            if action.label == label:
                return action
        return None


def build_plugin(
    label: str | None = None,
    icon: str | None = None,
    body_types: Iterable[str] | None = None,
) -> PluginDefinition:
    """Build the plugin with its single send action.

    Args:
        label: Menu label (default: "Send (Strip Comments)").
        icon: Menu icon (default: check_circle).
        body_types: Body types eligible for stripping.

    Returns:
        PluginDefinition ready for registration.
    """
    allowed = list(body_types) if body_types is not None else list(DEFAULT_BODY_TYPES)

    def on_select(ctx: PluginContext, request: HttpRequest) -> HttpResponse | None:
        return send_stripped(request, ctx.renderer, ctx.sender, ctx.notifier, allowed)

    return PluginDefinition(
        name=PLUGIN_NAME,
        http_request_actions=[
            HttpRequestAction(label=label or DEFAULT_LABEL, icon=icon or DEFAULT_ICON, on_select=on_select)
        ],
    )
