import io
import json
import os
from collections import Counter

os.environ.setdefault("MCPLAYER_LOG_TO_FILE", "false")
os.environ.setdefault("MCPLAYER_LOG_TO_STDOUT", "false")

import httpx  # noqa: E402
import pytest  # noqa: E402
from PIL import Image  # noqa: E402

from mcplayer import textures  # noqa: E402
from mcplayer.avatar import AvatarExtractor  # noqa: E402
from mcplayer.config import MojangSettings  # noqa: E402
from mcplayer.models import (  # noqa: E402
    TextureDescriptor,
    TextureRef,
    Textures,
)
from mcplayer.mojang_api import MojangClient  # noqa: E402
from mcplayer.player import PlayerIdentity  # noqa: E402

NOTCH_UUID = "069a79f444e94726a5befca90e38aaf5"
NOTCH_SKIN_URL = "http://textures.minecraft.net/texture/292009a4925b58f02c77dadc3ecef07ea4c7472f64e0fdc32ce5522489362680"
NOTCH_CAPE_URL = "http://textures.minecraft.net/texture/3f688e0e699b3d9fe448b5bb50a3a288f9c589762b3dae8308842122dcb81"


def make_skin(width: int = 64, height: int = 64, fmt: str = "PNG") -> bytes:
    """Build a skin whose every pixel has a distinct color."""
    image = Image.new("RGBA", (width, height))
    for x in range(width):
        for y in range(height):
            image.putpixel((x, y), (x * 4 % 256, y * 4 % 256, (x * 7 + y) % 256, 255))
    output = io.BytesIO()
    image.save(output, format=fmt)
    return output.getvalue()


def texture_property(uuid: str, name: str, skin_url=None, cape_url=None):
    descriptor = TextureDescriptor(
        timestamp=1700000000000,
        profile_id=uuid,
        profile_name=name,
        textures=Textures(
            skin=TextureRef(url=skin_url) if skin_url else None,
            cape=TextureRef(url=cape_url) if cape_url else None,
        ),
    )
    return textures.encode(descriptor)


class FakeMojang:
    """In-memory stand-in for the Mojang account, session and texture servers."""

    def __init__(self):
        self.players: dict[str, str] = {}
        self.profiles: dict[str, dict] = {}
        self.history: dict[str, list[dict]] = {}
        self.textures: dict[str, bytes] = {}
        self.profile_status: int | None = None
        self.profile_error: Exception | None = None
        self.calls: Counter = Counter()
        self.requests: list[httpx.Request] = []

    def add_player(self, name, uuid, skin_url=None, cape_url=None, properties=None):
        self.players[name.lower()] = uuid
        if properties is None:
            properties = [
                texture_property(uuid, name, skin_url, cape_url).model_dump(
                    exclude_none=True
                )
            ]
        self.profiles[uuid] = {"id": uuid, "name": name, "properties": properties}

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path
        host = request.url.host

        if host == "api.mojang.com" and path.startswith("/users/profiles/minecraft/"):
            self.calls["uuid"] += 1
            name = path.rsplit("/", 1)[-1]
            uuid = self.players.get(name.lower())
            if uuid is None:
                return httpx.Response(204)
            return httpx.Response(
                200, json={"id": uuid, "name": self.profiles[uuid]["name"]}
            )

        if host == "api.mojang.com" and path.endswith("/names"):
            self.calls["history"] += 1
            uuid = path.split("/")[3]
            if uuid not in self.history:
                return httpx.Response(404)
            return httpx.Response(200, json=self.history[uuid])

        if host == "sessionserver.mojang.com":
            self.calls["profile"] += 1
            if self.profile_error is not None:
                raise self.profile_error
            if self.profile_status is not None:
                return httpx.Response(self.profile_status, text="oops")
            uuid = path.rsplit("/", 1)[-1]
            if uuid not in self.profiles:
                return httpx.Response(204)
            return httpx.Response(200, content=json.dumps(self.profiles[uuid]))

        if host == "textures.minecraft.net":
            self.calls["texture"] += 1
            key = str(request.url.copy_with(scheme="http"))
            if key not in self.textures:
                return httpx.Response(404)
            return httpx.Response(200, content=self.textures[key])

        return httpx.Response(500)


@pytest.fixture
def mojang():
    fake = FakeMojang()
    fake.add_player("Notch", NOTCH_UUID, NOTCH_SKIN_URL, NOTCH_CAPE_URL)
    fake.textures[NOTCH_SKIN_URL] = make_skin()
    return fake


@pytest.fixture
def client(mojang):
    return MojangClient(MojangSettings(), transport=httpx.MockTransport(mojang.handler))


@pytest.fixture
def make_player(client):
    def factory(name=None, uuid=None):
        return PlayerIdentity(
            name=name, uuid=uuid, client=client, extractor=AvatarExtractor(head_size=200)
        )

    return factory
