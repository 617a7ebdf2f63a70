"""TelegramClient -- minimal synchronous transport for request payloads.

The client posts a request's direct form to ``<base_url>/<method>`` with the
``requests`` library and decodes the reply envelope into the request's
declared result type.  It never retries; callers that need backoff or a
different transport can use the request models on their own.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import requests

from telegram_dataclass.exceptions import APIException
from telegram_dataclass.methods import TelegramRequest
from telegram_dataclass.models import TelegramResponse

_client_logger = logging.getLogger("telegram_dataclass.client")


class TelegramClient:
    """Client-side transport for the Telegram Bot API.

    Usage::

        client = TelegramClient.from_config()
        me = client.call(GetMeRequest())
    """

    _DEFAULT_TIMEOUT: float = 10
    _DEFAULT_FILE_HOST: str = "https://api.telegram.org"

    def __init__(
        self,
        base_url: str,
        timeout: float = _DEFAULT_TIMEOUT,
        bot_token: str | None = None,
        file_base_url: str | None = None,
    ) -> None:
        """Create a new client bound to *base_url*.

        Args:
            base_url: Full Bot API base URL (e.g. ``https://api.telegram.org/bot<token>``).
            timeout: Request timeout in seconds.
            bot_token: Raw bot token, used to build file-download URLs.
            file_base_url: Explicit file-download base URL; derived from
                *bot_token* when omitted.
        """
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._bot_token = bot_token
        if file_base_url is None and bot_token is not None:
            file_base_url = f"{self._DEFAULT_FILE_HOST}/file/bot{bot_token}"
        self._file_base_url = file_base_url.rstrip("/") if file_base_url else None

    @classmethod
    def from_config(cls) -> "TelegramClient":
        """Build a client from :mod:`telegram_dataclass.config`."""
        from telegram_dataclass import config  # deferred: config loads .env and configures logging

        return cls(
            config.BASE_URL,
            timeout=config.REQUEST_TIMEOUT,
            bot_token=config.BOT_TOKEN,
            file_base_url=config.FILE_BASE_URL,
        )

    # ------------------------------------------------------------------
    #  Internal helpers
    # ------------------------------------------------------------------

    def _post(self, endpoint: str, body: str) -> Dict[str, Any]:
        """POST a JSON body and return the parsed reply.

        Raises:
            APIException: Non-2xx status, or a reply with ``"ok": false``.
            requests.RequestException: On transport-level failures.
        """
        url = f"{self._base_url}/{endpoint.lstrip('/')}"
        response = requests.post(
            url,
            data=body.encode("utf-8"),
            headers={"Content-Type": "application/json"},
            timeout=self._timeout,
        )
        try:
            data = response.json()
        except ValueError:
            data = {}
        if not isinstance(data, dict):
            data = {}
        if not response.ok or data.get("ok") is False:
            _client_logger.warning(
                "Bot API call failed",
                extra={
                    "api_endpoint": endpoint,
                    "status_code": response.status_code,
                    "error_code": data.get("error_code"),
                    "description": data.get("description"),
                },
            )
            raise APIException(response.status_code, data)
        return data

    # ------------------------------------------------------------------
    #  Public API
    # ------------------------------------------------------------------

    def call(self, request: TelegramRequest) -> Any:
        """Send *request* and return the decoded ``result``.

        Raises:
            APIException: The API rejected the call.
            DecodeError: The reply does not match the request's result type.
            requests.RequestException: On transport-level failures.
        """
        _client_logger.debug("Calling Bot API", extra={"api_endpoint": request.method})
        data = self._post(request.method, request.to_json_for_request())
        envelope = TelegramResponse.from_dict(data)
        return request.parse_result(envelope.result)

    def file_url(self, file_path: str) -> str:
        """Download URL for the ``file_path`` of a :class:`~telegram_dataclass.models.File`."""
        if self._file_base_url is None:
            raise ValueError("bot_token or file_base_url is required to build file URLs")
        return f"{self._file_base_url}/{file_path.lstrip('/')}"

    def download_file(self, file_path: str) -> bytes:
        """Download raw bytes from the Telegram file CDN.

        Raises:
            requests.HTTPError: If the HTTP response status is not 2xx.
            requests.RequestException: On transport-level failures.
        """
        _client_logger.debug("Downloading file", extra={"api_endpoint": "file", "file_path": file_path})
        response = requests.get(self.file_url(file_path), timeout=self._timeout)
        response.raise_for_status()
        return response.content
