"""Value objects returned by the Mojang API and decoded from texture properties.

Attribute names are snake_case; the camelCase wire names are kept as aliases so
that payloads can be validated and dumped with ``by_alias=True``.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class MojangModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)


class Property(MojangModel):
    name: str
    value: str
    signature: Optional[str] = None


class Profile(MojangModel):
    id: str
    name: str
    properties: list[Property] = Field(default_factory=list)


class TextureMetadata(MojangModel):
    model: Optional[str] = None


class TextureRef(MojangModel):
    url: str
    metadata: Optional[TextureMetadata] = None


class Textures(MojangModel):
    skin: Optional[TextureRef] = Field(default=None, alias="SKIN")
    cape: Optional[TextureRef] = Field(default=None, alias="CAPE")


class TextureDescriptor(MojangModel):
    """Decoded payload of the ``textures`` profile property."""

    timestamp: int
    profile_id: str = Field(alias="profileId")
    profile_name: str = Field(alias="profileName")
    signature_required: bool = Field(default=False, alias="signatureRequired")
    textures: Textures = Field(default_factory=Textures)


class NameHistoryEntry(MojangModel):
    name: str
    changed_to_at: Optional[int] = Field(default=None, alias="changedToAt")


class UUIDResponse(MojangModel):
    id: str
    name: str
