"""Toast notifications.

TIER 1: May import from core only.
"""

import subprocess
import sys

from core.models import Toast
from core.types import ToastColor
from lib.logger import get_logger

logger = get_logger("notify")

DESKTOP_TITLE = "Send (Strip Comments)"


def _applescript_string(text: str) -> str:
    """Quote text as an AppleScript string literal."""
    escaped = text.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def desktop_notify(title: str, message: str) -> None:
    """Send a desktop notification.

    Only macOS is supported; elsewhere this is a no-op.

    Args:
        title: Notification title.
        message: Notification message.
    """
    if sys.platform == "darwin":
        script = f"display notification {_applescript_string(message)} with title {_applescript_string(title)}"
        subprocess.run(  # noqa: S603
            ["osascript", "-e", script],  # noqa: S607
            capture_output=True,
            check=False,
            timeout=5,
        )


class ToastNotifier:
    """NotifyPort implementation that logs toasts and keeps a history."""

    def __init__(self, desktop: bool = False) -> None:
        self.desktop = desktop
        self.history: list[Toast] = []

    def show(self, toast: Toast) -> None:
        """Show a toast."""
        self.history.append(toast)

        if toast.color is ToastColor.DANGER:
            logger.error(toast.message)
        elif toast.color is ToastColor.WARNING:
            logger.warning(toast.message)
        else:
            logger.info(toast.message)

        if self.desktop:
            try:
                desktop_notify(DESKTOP_TITLE, toast.message)
            except (OSError, subprocess.TimeoutExpired) as e:
                logger.warning("Desktop notification failed: %s", e)
