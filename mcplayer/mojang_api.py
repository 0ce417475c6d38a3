"""Mojang API client for player information."""

from typing import Any, Optional

import httpx
from pydantic import TypeAdapter, ValidationError

from .config import MojangSettings, settings
from .errors import NotFoundError, PlayerLookupError
from .logger import logger
from .models import NameHistoryEntry, Profile, UUIDResponse

_name_history_adapter = TypeAdapter(list[NameHistoryEntry])


class MojangClient:
    """Thin async client over the Mojang account and session servers.

    Every call opens its own ``httpx.AsyncClient``; a transport can be
    injected to route requests somewhere other than the network.
    """

    def __init__(
        self,
        mojang_settings: Optional[MojangSettings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.settings = mojang_settings or settings.mojang
        self._transport = transport

        self.uuid_url = self.settings.api_url + "/users/profiles/minecraft/{name}"
        self.name_history_url = self.settings.api_url + "/user/profiles/{uuid}/names"
        self.profile_url = (
            self.settings.session_url + "/session/minecraft/profile/{uuid}"
        )

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=self.settings.request_timeout_seconds,
            transport=self._transport,
        )

    async def _get(self, url: str, what: str) -> httpx.Response:
        try:
            async with self._client() as client:
                response = await client.get(url)
        except httpx.TimeoutException as e:
            logger.error(f"Timeout fetching {what}")
            raise PlayerLookupError(f"Timeout fetching {what}") from e
        except httpx.HTTPError as e:
            logger.error(f"Error fetching {what}: {e}")
            raise PlayerLookupError(f"Error fetching {what}: {e}") from e

        if response.status_code in (204, 404):
            logger.warning(f"Not found in Mojang API: {what}")
            raise NotFoundError(f"Not found: {what}", response.status_code)
        elif response.status_code == 429:
            logger.warning(f"Mojang API rate limited for {what}")
            raise PlayerLookupError(
                f"Rate limited fetching {what}", response.status_code
            )
        elif response.status_code != 200:
            logger.error(
                f"Unexpected Mojang API response {response.status_code} for {what}"
            )
            raise PlayerLookupError(
                f"Unexpected response {response.status_code} for {what}",
                response.status_code,
            )

        return response

    async def _get_json(self, url: str, what: str) -> Any:
        response = await self._get(url, what)
        try:
            return response.json()
        except ValueError as e:
            raise PlayerLookupError(f"Malformed response body for {what}") from e

    async def fetch_uuid(self, name: str) -> str:
        """Fetch player UUID by name.

        Args:
            name: Player username

        Returns:
            UUID (without dashes)
        """
        data = await self._get_json(self.uuid_url.format(name=name), f"player {name}")
        try:
            return UUIDResponse.model_validate(data).id
        except ValidationError as e:
            raise PlayerLookupError(f"Malformed UUID response for {name}") from e

    async def fetch_name_history(self, uuid: str) -> list[NameHistoryEntry]:
        """Fetch the name history of a player, oldest name first."""
        uuid_clean = uuid.replace("-", "")
        data = await self._get_json(
            self.name_history_url.format(uuid=uuid_clean),
            f"name history of {uuid_clean}",
        )
        try:
            return _name_history_adapter.validate_python(data)
        except ValidationError as e:
            raise PlayerLookupError(
                f"Malformed name history response for {uuid_clean}"
            ) from e

    async def fetch_profile(self, uuid: str) -> Profile:
        """Fetch the profile of a player, including texture properties."""
        uuid_clean = uuid.replace("-", "")
        data = await self._get_json(
            self.profile_url.format(uuid=uuid_clean), f"profile {uuid_clean}"
        )
        try:
            return Profile.model_validate(data)
        except ValidationError as e:
            raise PlayerLookupError(
                f"Malformed profile response for {uuid_clean}"
            ) from e

    async def fetch_texture(self, url: str) -> bytes:
        """Download a texture image."""
        response = await self._get(url, f"texture {url}")
        return response.content
