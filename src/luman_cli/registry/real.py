"""HTTP registry client using requests."""

import logging
from typing import Any
from urllib.parse import quote

import requests
from pydantic import ValidationError

from luman_cli.exceptions import RegistryUnavailableError
from luman_cli.models.registry import RegistryItem
from luman_cli.registry.abc import RegistryClient

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 10.0


def parse_index(data: Any, location: str) -> list[RegistryItem]:
    """Parse an index.json payload of the form {"components": [...]}.

    Entries may be full item objects or bare component names.
    """
    if not isinstance(data, dict) or not isinstance(data.get("components"), list):
        raise RegistryUnavailableError(location, "index.json has no 'components' list")

    items: list[RegistryItem] = []
    for entry in data["components"]:
        if isinstance(entry, str):
            items.append(RegistryItem(name=entry))
            continue
        try:
            items.append(RegistryItem.model_validate(entry))
        except ValidationError as e:
            raise RegistryUnavailableError(location, f"malformed index entry: {e}") from e
    return items


def parse_item(data: Any, location: str) -> RegistryItem:
    try:
        return RegistryItem.model_validate(data)
    except ValidationError as e:
        raise RegistryUnavailableError(location, f"malformed component metadata: {e}") from e


class HttpRegistryClient(RegistryClient):
    """Production implementation fetching from a registry served over HTTP.

    Layout:
        GET {base}/index.json
        GET {base}/components/{name}.json
        GET {base}/components/{name}/{path}
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        session: requests.Session | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._session = session if session is not None else requests.Session()

    @property
    def location(self) -> str:
        return self._base_url

    def get_item(self, name: str) -> RegistryItem | None:
        url = f"{self._base_url}/components/{quote(name)}.json"
        response = self._get(url)
        if response.status_code == 404:
            logger.debug("Registry has no component %s (%s)", name, url)
            return None
        self._raise_for_status(response, url)
        return parse_item(self._json(response, url), url)

    def get_file(self, name: str, path: str) -> str:
        url = f"{self._base_url}/components/{quote(name)}/{quote(path)}"
        response = self._get(url)
        self._raise_for_status(response, url)
        return response.text

    def list_items(self) -> list[RegistryItem]:
        url = f"{self._base_url}/index.json"
        response = self._get(url)
        self._raise_for_status(response, url)
        return parse_index(self._json(response, url), url)

    def _get(self, url: str) -> requests.Response:
        try:
            return self._session.get(url, timeout=self._timeout)
        except requests.RequestException as e:
            raise RegistryUnavailableError(url, str(e)) from e

    def _raise_for_status(self, response: requests.Response, url: str) -> None:
        if not response.ok:
            raise RegistryUnavailableError(url, f"HTTP {response.status_code}")

    def _json(self, response: requests.Response, url: str) -> Any:
        try:
            return response.json()
        except ValueError as e:
            raise RegistryUnavailableError(url, "response is not valid JSON") from e
