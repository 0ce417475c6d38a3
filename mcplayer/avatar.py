"""Head avatar extraction from skin textures."""

import io
from typing import Any, Protocol

from PIL import Image, UnidentifiedImageError

from .config import settings
from .errors import ImageProcessingError

# Face region of the skin atlas: (left, top, right, bottom)
HEAD_BOX = (8, 8, 16, 16)


class ImageBackend(Protocol):
    """Minimal imaging capability needed to cut a head out of a skin."""

    def decode(self, data: bytes) -> Any: ...

    def size(self, image: Any) -> tuple[int, int]: ...

    def crop(self, image: Any, box: tuple[int, int, int, int]) -> Any: ...

    def resize_nearest(self, image: Any, size: tuple[int, int]) -> Any: ...

    def encode(self, image: Any, source: Any) -> bytes: ...


class PillowImageBackend:
    """ImageBackend implemented with Pillow."""

    def decode(self, data: bytes) -> Image.Image:
        try:
            image = Image.open(io.BytesIO(data))
            image.load()
        except (
            UnidentifiedImageError,
            Image.DecompressionBombError,
            OSError,
            ValueError,
        ) as e:
            raise ImageProcessingError(f"Cannot decode skin image: {e}") from e
        return image

    def size(self, image: Image.Image) -> tuple[int, int]:
        return image.size

    def crop(
        self, image: Image.Image, box: tuple[int, int, int, int]
    ) -> Image.Image:
        return image.crop(box)

    def resize_nearest(
        self, image: Image.Image, size: tuple[int, int]
    ) -> Image.Image:
        return image.resize(size, Image.Resampling.NEAREST)

    def encode(self, image: Image.Image, source: Image.Image) -> bytes:
        output = io.BytesIO()
        try:
            image.save(output, format=source.format or "PNG")
        except (OSError, ValueError, KeyError) as e:
            raise ImageProcessingError(f"Cannot encode avatar image: {e}") from e
        return output.getvalue()


class AvatarExtractor:
    """Cuts the face out of a skin and scales it up without smoothing."""

    def __init__(
        self,
        backend: ImageBackend | None = None,
        head_size: int | None = None,
    ):
        self.backend = backend or PillowImageBackend()
        self.head_size = head_size or settings.avatar.head_size

    def extract_head(self, image_bytes: bytes) -> bytes:
        """Extract the head avatar from a skin texture.

        The skin layout is not validated: any decodable image that contains
        the face rectangle is accepted, including legacy 64x32 skins.

        Args:
            image_bytes: Encoded skin image

        Returns:
            Encoded head_size x head_size avatar in the input's format

        Raises:
            ImageProcessingError: If the input is not an image or is smaller
                than the face rectangle
        """
        skin = self.backend.decode(image_bytes)

        width, height = self.backend.size(skin)
        _, _, right, bottom = HEAD_BOX
        if width < right or height < bottom:
            raise ImageProcessingError(
                f"Skin image is {width}x{height}, "
                f"need at least {right}x{bottom} to extract the head"
            )

        head = self.backend.crop(skin, HEAD_BOX)
        head = self.backend.resize_nearest(head, (self.head_size, self.head_size))
        return self.backend.encode(head, skin)
