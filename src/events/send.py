#!/usr/bin/env python3
"""Send (Strip Comments) entry point.

Reads `{"httpRequest": {...}}` from stdin, renders it with the configured
variables, strips comments from a JSON body, sends it and prints the
outcome as JSON.
"""

from core.errors import ConfigError
from core.models import HttpRequest
from lib.config import get_str_list, get_typed
from lib.hooks import error_response, output_response, read_hook_input
from lib.http import UrllibSender
from lib.logger import get_logger
from lib.notify import ToastNotifier
from lib.plugin import PluginContext, build_plugin
from lib.render import TemplateRenderer

logger = get_logger("send")


def build_context() -> tuple[PluginContext, ToastNotifier]:
    """Build host adapters from config.

    Returns:
        Tuple of (context, notifier) so the caller can read shown toasts.

    Raises:
        ConfigError: If a config value has the wrong type or range.
    """
    timeout = get_typed("send.timeout", (int, float), 30.0)
    if timeout <= 0:
        raise ConfigError(f"Invalid send.timeout: must be positive, got {timeout}")

    notifier = ToastNotifier(desktop=get_typed("notify.desktop", bool, False))
    context = PluginContext(
        renderer=TemplateRenderer(get_typed("variables", dict, {})),
        sender=UrllibSender(
            timeout=timeout,
            user_agent=get_typed("send.user_agent", str),
        ),
        notifier=notifier,
    )
    return context, notifier


def main() -> None:
    """Run the send action on the request from stdin."""
    hook_data = read_hook_input()
    raw_request = hook_data.get("httpRequest")
    if not isinstance(raw_request, dict) or not raw_request.get("url"):
        error_response("No request")
        return

    try:
        context, notifier = build_context()
        plugin = build_plugin(
            label=get_typed("action.label", str),
            icon=get_typed("action.icon", str),
            body_types=get_str_list("body_types"),
        )
    except ConfigError as e:
        logger.error("Config error: %s", e)
        error_response(str(e))
        return

    action = plugin.http_request_actions[0]
    response = action.on_select(context, HttpRequest.from_dict(raw_request))

    result: dict = {
        "ok": response is not None and response.is_success,
        "status": response.status if response is not None else None,
    }
    if notifier.history:
        result["toast"] = notifier.history[-1].to_dict()

    output_response(result)


if __name__ == "__main__":
    main()
