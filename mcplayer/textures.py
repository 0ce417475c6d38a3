"""Texture property codec.

Profile properties carry their payload as base64-encoded JSON. The ``textures``
property describes the SKIN and CAPE urls of a player.
"""

import base64
import binascii

import httpx
from pydantic import ValidationError

from .errors import MalformedTextureError
from .models import Property, TextureDescriptor

TEXTURES_PROPERTY = "textures"


def decode(prop: Property) -> TextureDescriptor:
    """Decode a texture property into a TextureDescriptor.

    Args:
        prop: Profile property whose value is base64-encoded JSON

    Returns:
        The decoded texture descriptor

    Raises:
        MalformedTextureError: If the value is not base64, not JSON, or is
            missing required fields
    """
    try:
        raw = base64.b64decode(prop.value, validate=True)
        text = raw.decode("utf-8")
    except (binascii.Error, UnicodeDecodeError) as e:
        raise MalformedTextureError(
            f"Property '{prop.name}' is not valid base64 text: {e}"
        ) from e

    try:
        return TextureDescriptor.model_validate_json(text)
    except ValidationError as e:
        raise MalformedTextureError(
            f"Property '{prop.name}' does not contain a texture descriptor: {e}"
        ) from e


def encode(descriptor: TextureDescriptor, name: str = TEXTURES_PROPERTY) -> Property:
    """Encode a TextureDescriptor the way the session server does."""
    payload = descriptor.model_dump_json(by_alias=True, exclude_none=True)
    value = base64.b64encode(payload.encode("utf-8")).decode("ascii")
    return Property(name=name, value=value)


def force_https(url: str) -> str:
    """Rewrite the scheme of a texture url to https."""
    return str(httpx.URL(url).copy_with(scheme="https"))
