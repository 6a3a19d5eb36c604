"""Lib module - I/O adapters.

TIER 1: May import from core only.
"""

from core.jsonc import strip_comments
from lib.action import send_stripped, should_process_body, strip_request_body
from lib.config import clear_cache, get, get_project_root, get_str_list, get_typed, load_config
from lib.hooks import error_response, output_response, read_hook_input, read_text_input
from lib.http import UrllibSender
from lib.logger import get_logger, set_log_level
from lib.notify import ToastNotifier, desktop_notify
from lib.plugin import HttpRequestAction, PluginContext, PluginDefinition, build_plugin
from lib.render import TemplateRenderer, render_template

__all__ = [
    "HttpRequestAction",
    "PluginContext",
    "PluginDefinition",
    "TemplateRenderer",
    "ToastNotifier",
    "UrllibSender",
    "build_plugin",
    "clear_cache",
    "desktop_notify",
    "error_response",
    "get",
    "get_logger",
    "get_project_root",
    "get_str_list",
    "get_typed",
    "load_config",
    "output_response",
    "read_hook_input",
    "read_text_input",
    "render_template",
    "send_stripped",
    "set_log_level",
    "should_process_body",
    "strip_comments",
    "strip_request_body",
]
