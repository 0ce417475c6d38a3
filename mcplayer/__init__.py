"""
Minecraft player identity resolution.

Resolves names and UUIDs against the Mojang API, decodes profile textures
and cuts head avatars out of skins.
"""

from .avatar import AvatarExtractor, ImageBackend, PillowImageBackend
from .errors import (
    ImageProcessingError,
    MalformedTextureError,
    NoCustomSkinError,
    NotFoundError,
    PlayerError,
    PlayerLookupError,
)
from .models import NameHistoryEntry, Profile, Property, TextureDescriptor
from .mojang_api import MojangClient
from .player import PlayerIdentity

__all__ = [
    "PlayerIdentity",
    "MojangClient",
    "AvatarExtractor",
    "ImageBackend",
    "PillowImageBackend",
    "Profile",
    "Property",
    "TextureDescriptor",
    "NameHistoryEntry",
    "PlayerError",
    "PlayerLookupError",
    "NotFoundError",
    "MalformedTextureError",
    "NoCustomSkinError",
    "ImageProcessingError",
]
