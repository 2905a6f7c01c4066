"""HTTP control channel to a running Umi-OCR instance.

Sends command payloads to the ``/argv`` endpoint and returns the raw text
response. No retries happen here: callers decide what a failure means.
"""

from typing import Protocol

import requests

from src.errors import ResponseReadError, TransportError
from src.utils.logger import get_logger

from .commands import Command

logger = get_logger(__name__)

DEFAULT_URL = "http://127.0.0.1:1224/argv"


class ControlChannel(Protocol):
    """Anything that accepts a command and returns the remote text reply."""

    def send(self, command: Command) -> str: ...


class HttpControlChannel:
    """Control channel backed by ``requests``.

    Args:
        url: Address of the Umi-OCR command endpoint.
        timeout: Per-request timeout in seconds.
        session: Optional session to reuse connections; a plain
            ``requests.post`` is used when omitted.
    """

    def __init__(
        self,
        url: str = DEFAULT_URL,
        timeout: float = 30.0,
        session: requests.Session | None = None,
    ) -> None:
        self.url = url
        self.timeout = timeout
        self.session = session

    def send(self, command: Command) -> str:
        """Send a command and return the response body.

        Args:
            command: The command to send.

        Returns:
            The response body as text.

        Raises:
            TransportError: If the endpoint is unreachable or answers
                with a non-success status.
            ResponseReadError: If the response body is cut short or
                cannot be decoded.
        """
        logger.debug("Sending command to %s: %s", self.url, command)
        post = self.session.post if self.session is not None else requests.post
        try:
            response = post(
                self.url,
                json=command.to_payload(),
                headers={"Content-Type": "application/json"},
                timeout=self.timeout,
                stream=True,
            )
        except requests.exceptions.RequestException as exc:
            raise TransportError(
                f"Error sending request to Umi-OCR: {exc}"
            ) from exc

        with response:
            if not response.ok:
                raise TransportError(
                    f"Umi-OCR answered {response.status_code} to '{command}'"
                )
            try:
                text = response.content.decode(_body_encoding(response))
            except (
                UnicodeDecodeError,
                LookupError,
                requests.exceptions.RequestException,
            ) as exc:
                raise ResponseReadError(
                    f"Error reading response from Umi-OCR: {exc}"
                ) from exc

        logger.debug("Received %d characters", len(text))
        return text


def _body_encoding(response: requests.Response) -> str:
    """Return the declared charset, falling back to UTF-8."""
    content_type = response.headers.get("Content-Type", "")
    if "charset=" in content_type.lower() and response.encoding:
        return response.encoding
    return "utf-8"
