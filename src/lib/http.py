"""HTTP transport using urllib.

TIER 1: May import from core only.

Synchronous and minimal. HTTP error statuses come back as responses so
the caller can report them; only transport failures raise.
"""

import urllib.error
import urllib.request

from core.errors import SendError
from core.models import HttpRequest, HttpResponse
from lib.logger import get_logger

DEFAULT_TIMEOUT = 30.0

logger = get_logger("http")


class UrllibSender:
    """SendPort implementation based on urllib.request."""

    def __init__(self, timeout: float = DEFAULT_TIMEOUT, user_agent: str | None = None) -> None:
        self.timeout = float(timeout)
        self.user_agent = user_agent

    def _build(self, request: HttpRequest) -> urllib.request.Request:
        headers = dict(request.headers)
        if self.user_agent and "User-Agent" not in headers:
            headers["User-Agent"] = self.user_agent
        if request.body_type and not any(k.lower() == "content-type" for k in headers):
            headers["Content-Type"] = request.body_type

        data = request.body_text.encode("utf-8") if request.body_text is not None else None
        return urllib.request.Request(request.url, data=data, headers=headers, method=request.method)

    def send(self, request: HttpRequest) -> HttpResponse:
        """Send the request and return the response.

        Raises:
            SendError: If the URL is invalid or the connection fails.
        """
        try:
            url_req = self._build(request)
        except ValueError as e:
            raise SendError(f"Invalid URL {request.url!r}: {e}") from e

        logger.info("Sending %s %s", request.method, request.url)

        try:
            with urllib.request.urlopen(url_req, timeout=self.timeout) as resp:  # noqa: S310
                return HttpResponse(
                    status=resp.status,
                    status_reason=resp.reason,
                    headers=dict(resp.headers.items()),
                    body=resp.read(),
                    url=resp.geturl(),
                )
        except urllib.error.HTTPError as e:
            # 4xx/5xx still produced a response
            return HttpResponse(
                status=e.code,
                status_reason=e.reason if isinstance(e.reason, str) else None,
                headers=dict(e.headers.items()) if e.headers else {},
                body=e.read(),
                url=e.url,
            )
        except urllib.error.URLError as e:
            raise SendError(str(e.reason)) from e
        except (TimeoutError, OSError) as e:
            raise SendError(str(e) or e.__class__.__name__) from e
