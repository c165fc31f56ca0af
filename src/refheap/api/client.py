"""RefHeap API client."""

import json
from typing import Any, overload
from urllib.parse import quote

import httpx

from .config import Config
from .exceptions import DecodeError, ServiceError
from .models import Paste, HighlightedPaste


@overload
def parse_body(response: httpx.Response, to: None = None) -> dict[str, Any]: ...


@overload
def parse_body(response: httpx.Response, to: Paste) -> Paste: ...


@overload
def parse_body(response: httpx.Response, to: type[HighlightedPaste]) -> HighlightedPaste: ...


def parse_body(response, to=None):
    """
    Decode a RefHeap response body.

    The body is read fully and the response closed, whatever happens.

    :param response: HTTP response object
    :param to: A :class:`Paste` to update in place, the :class:`HighlightedPaste` class,
               or ``None`` to just check for an error
    :return: The updated paste, a new highlighted paste, or the decoded mapping
    :raises DecodeError: If the body is not a JSON object of the expected shape
    :raises ServiceError: If the body carries an ``error`` message
    """
    try:
        body = response.read()
    finally:
        response.close()

    try:
        data = json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise DecodeError(f"Invalid JSON in response: {e}", status_code=response.status_code)
    if not isinstance(data, dict):
        raise DecodeError(f"Expected a JSON object, got {type(data).__name__}",
                          status_code=response.status_code)

    message = data.get("error")
    if message:
        raise ServiceError(str(message), status_code=response.status_code, response_data=data)

    if to is None:
        return data
    if isinstance(to, Paste):
        to.update_from(data)
        return to
    return to.from_dict(data)


class RefheapClient:
    """Client for interacting with the RefHeap API."""

    def __init__(
        self,
        config: Config | None = None,
        transport: httpx.BaseTransport | None = None,
    ):
        """Initialize the API client.

        Args:
            config: Client configuration, anonymous defaults if omitted
            transport: Optional httpx transport (used for testing)
        """
        self.config = config or Config()
        self.base_url = self.config.base_url.rstrip("/")
        self._client = httpx.Client(
            timeout=self.config.timeout,
            headers={"User-Agent": "RefHeap-Python-Client"},
            transport=transport,
        )

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def close(self):
        """Close the HTTP client."""
        self._client.close()

    def _paste_url(self, paste: Paste, suffix: str = "") -> str:
        if not paste.paste_id:
            raise ValueError("Paste has no paste_id; create it first or set the ID of an existing paste")
        return f"{self.base_url}/paste/{quote(paste.paste_id, safe='')}{suffix}"

    def _paste_form(self, paste: Paste) -> dict[str, str]:
        data = self.config.auth_fields()
        if paste.contents:
            data["contents"] = paste.contents
        if paste.language:
            data["language"] = paste.language
        data["private"] = str(paste.private).lower()
        return data

    def get(self, paste: Paste) -> Paste:
        """Fetch a paste by its ``paste_id``, overwriting all of its fields.

        No authentication is sent; the ID of a private paste is enough to read it.

        Raises:
            ServiceError: If the paste doesn't exist
            DecodeError: If the response is not valid JSON
        """
        response = self._client.get(self._paste_url(paste))
        return parse_body(response, paste)

    def get_paste(self, paste_id: str) -> Paste:
        """Fetch a paste by ID into a new :class:`Paste`."""
        return self.get(Paste(paste_id=paste_id))

    def create(self, paste: Paste) -> Paste:
        """Create a new paste from ``contents``, ``language`` and ``private``.

        The paste is updated with the values assigned by the service (ID, URL, owner...).
        """
        response = self._client.post(f"{self.base_url}/paste", data=self._paste_form(paste))
        return parse_body(response, paste)

    def save(self, paste: Paste) -> Paste:
        """Save changes of an existing paste. The configured user must own it."""
        response = self._client.post(self._paste_url(paste), data=self._paste_form(paste))
        return parse_body(response, paste)

    def delete(self, paste: Paste) -> None:
        """Delete a paste. The configured user must own it.

        Raises:
            ServiceError: If the service refused, or answered with anything but 204
            DecodeError: If a non-204 answer is not valid JSON
        """
        response = self._client.delete(self._paste_url(paste), params=self.config.auth_fields())
        if response.status_code == httpx.codes.NO_CONTENT:
            response.close()
            return
        data = parse_body(response)
        raise ServiceError(f"Unexpected response status {response.status_code}",
                           status_code=response.status_code, response_data=data)

    def fork(self, paste: Paste) -> Paste:
        """Fork a paste. Afterwards ``paste`` represents the new copy."""
        data = self.config.auth_fields()
        data["id"] = paste.paste_id
        response = self._client.post(self._paste_url(paste, "/fork"), data=data)
        return parse_body(response, paste)

    def get_highlighted(self, paste: Paste) -> HighlightedPaste:
        """Get the syntax highlighted HTML of a paste. The paste itself is not modified."""
        response = self._client.get(self._paste_url(paste, "/highlight"))
        return parse_body(response, HighlightedPaste)


# Stateless wrappers for one-off calls

def get(config: Config, paste: Paste) -> Paste:
    with RefheapClient(config) as client:
        return client.get(paste)


def get_paste(config: Config, paste_id: str) -> Paste:
    with RefheapClient(config) as client:
        return client.get_paste(paste_id)


def create(config: Config, paste: Paste) -> Paste:
    with RefheapClient(config) as client:
        return client.create(paste)


def save(config: Config, paste: Paste) -> Paste:
    with RefheapClient(config) as client:
        return client.save(paste)


def delete(config: Config, paste: Paste) -> None:
    with RefheapClient(config) as client:
        client.delete(paste)


def fork(config: Config, paste: Paste) -> Paste:
    with RefheapClient(config) as client:
        return client.fork(paste)


def get_highlighted(config: Config, paste: Paste) -> HighlightedPaste:
    with RefheapClient(config) as client:
        return client.get_highlighted(paste)
