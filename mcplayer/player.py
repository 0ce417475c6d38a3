"""Minecraft player identity and appearance resolution."""

import asyncio
from typing import Optional

from . import textures
from .avatar import AvatarExtractor
from .errors import NoCustomSkinError, PlayerLookupError
from .logger import logger
from .models import (
    NameHistoryEntry,
    Profile,
    TextureDescriptor,
    TextureRef,
    Textures,
)
from .mojang_api import MojangClient


class PlayerIdentity:
    """A Minecraft player known by name, UUID, or both.

    Name and UUID are filled lazily from one another and cached for the
    lifetime of the object. Profiles, name history and skins are fetched
    on every call since they can change upstream.
    """

    def __init__(
        self,
        name: Optional[str] = None,
        uuid: Optional[str] = None,
        client: Optional[MojangClient] = None,
        extractor: Optional[AvatarExtractor] = None,
    ):
        if not name and not uuid:
            raise ValueError("A player needs at least a name or a UUID")

        self._name = name or None
        self._uuid = uuid or None
        self.client = client or MojangClient()
        self.extractor = extractor or AvatarExtractor()

    def __repr__(self) -> str:
        return f"PlayerIdentity(name={self._name!r}, uuid={self._uuid!r})"

    @property
    def name(self) -> Optional[str]:
        """Name if already known, without any lookup."""
        return self._name

    @property
    def uuid(self) -> Optional[str]:
        """UUID if already known, without any lookup."""
        return self._uuid

    async def resolve_uuid(self) -> str:
        """Get the UUID of this player, looking it up by name if needed.

        Raises:
            NotFoundError: If no player has this name
            PlayerLookupError: If the Mojang API fails
        """
        if self._uuid is not None:
            return self._uuid

        name = await self.resolve_name()
        logger.debug(f"Resolving UUID of {name}")
        self._uuid = await self.client.fetch_uuid(name)
        return self._uuid

    async def resolve_name(self) -> str:
        """Get the name of this player, looking it up by UUID if needed."""
        if self._name is not None:
            return self._name

        # Seeded with a UUID only, so this does not recurse back into us
        uuid = await self.resolve_uuid()
        logger.debug(f"Resolving name of {uuid}")
        profile = await self.client.fetch_profile(uuid)
        self._name = profile.name
        return self._name

    async def resolve_name_history(self) -> list[NameHistoryEntry]:
        uuid = await self.resolve_uuid()
        return await self.client.fetch_name_history(uuid)

    async def resolve_profile(self) -> Profile:
        """Get the profile of this player.

        Lookup failures are not raised: a profile wearing the default skin
        is returned instead, so every player can be displayed.
        """
        uuid = await self.resolve_uuid()

        try:
            profile = await self.client.fetch_profile(uuid)
        except PlayerLookupError as e:
            logger.warning(f"Using default profile for {uuid}: {e}")
            # UUID stands in for an unknown name and is not memoized
            return self._default_profile(uuid, self._name or uuid)

        if self._name is None:
            self._name = profile.name
        return profile

    def _default_profile(self, uuid: str, name: str) -> Profile:
        descriptor = TextureDescriptor(
            timestamp=0,
            profile_id=uuid,
            profile_name=name,
            signature_required=False,
            textures=Textures(
                skin=TextureRef(url=self.client.settings.default_skin_url)
            ),
        )
        return Profile(id=uuid, name=name, properties=[textures.encode(descriptor)])

    async def _textures(self) -> Textures:
        profile = await self.resolve_profile()
        if not profile.properties:
            raise NoCustomSkinError(f"Profile of {profile.name} has no textures")
        return textures.decode(profile.properties[0]).textures

    async def get_skin_url(self) -> str:
        """Get the https url of this player's skin.

        Raises:
            NoCustomSkinError: If the profile has no skin texture
            MalformedTextureError: If the texture property cannot be decoded
        """
        skin = (await self._textures()).skin
        if skin is None:
            raise NoCustomSkinError(f"{self} has no custom skin")
        return textures.force_https(skin.url)

    async def get_cape_url(self) -> Optional[str]:
        """Get the https url of this player's cape, or None without a cape."""
        cape = (await self._textures()).cape
        if cape is None:
            return None
        return textures.force_https(cape.url)

    async def get_skin(self) -> bytes:
        """Download this player's skin image."""
        url = await self.get_skin_url()
        return await self.client.fetch_texture(url)

    async def get_head(self) -> bytes:
        """Get this player's face scaled up to an avatar image.

        Raises:
            NoCustomSkinError: If the profile has no skin texture
            ImageProcessingError: If the skin cannot be cropped or resized
        """
        skin = await self.get_skin()
        return await asyncio.to_thread(self.extractor.extract_head, skin)
