"""Exceptions raised while resolving players, textures and avatars."""


class PlayerError(Exception):
    """Base class for every error raised by mcplayer."""


class PlayerLookupError(PlayerError):
    """The identity service could not be reached or answered with a failure."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class NotFoundError(PlayerLookupError):
    """The identity service is reachable but does not know the player."""


class MalformedTextureError(PlayerError):
    """A texture property exists but cannot be decoded."""


class NoCustomSkinError(PlayerError):
    """The profile carries no texture property or no SKIN entry."""


class ImageProcessingError(PlayerError):
    """The skin image could not be cropped or resized."""
