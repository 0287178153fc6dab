"""
Image helpers

Converts between Pillow images, files on disk and the base64 data URIs
exchanged with MagicQuill.

Features:
- Encoding images and files as PNG data URIs
- Decoding data URIs back into images
- Building the empty edge mask used when no edges were drawn
- Checking the size of images returned by the backend
"""

from io import BytesIO
from pathlib import Path

from PIL import Image, UnidentifiedImageError

from magicquill_client.errors import InvalidImageError
from magicquill_client.utils import decode_data_uri, make_data_uri


def image_to_data_uri(img: Image.Image) -> str:
    output_buffer = BytesIO()
    img.save(output_buffer, format="PNG")
    return make_data_uri(output_buffer.getvalue(), "image/png")


def load_image(path) -> Image.Image:
    """Opens an image file fully into memory."""
    path = Path(path)
    try:
        with Image.open(path) as img:
            img.load()
            return img.copy()
    except (UnidentifiedImageError, OSError) as e:
        raise InvalidImageError(f"Could not read image {path}: {e}") from e


def file_to_data_uri(path) -> str:
    """Reads an image file and re-encodes it as a PNG data URI."""
    return image_to_data_uri(load_image(path))


def data_uri_to_image(data: str) -> Image.Image:
    img_bytes = decode_data_uri(data)
    try:
        img = Image.open(BytesIO(img_bytes))
        img.load()
    except (UnidentifiedImageError, OSError) as e:
        raise InvalidImageError(f"Data is not a readable image: {e}") from e
    return img


def empty_mask(size: tuple[int, int]) -> str:
    """
    Fully transparent RGBA image of the given size, as a data URI.
    """
    width, height = size
    return image_to_data_uri(Image.new("RGBA", (width, height), (0, 0, 0, 0)))


def image_size(data: str) -> tuple[int, int]:
    return data_uri_to_image(data).size


def is_resized_to(data: str, resolution: int) -> bool:
    """
    True when the longer side of the image equals the target resolution.
    """
    return max(image_size(data)) == resolution


def scale_to_longest_side(img: Image.Image, longest_side: int) -> Image.Image:
    """
    Resize keeping the aspect ratio so the longer side is exactly longest_side.
    """
    scale = longest_side / max(img.width, img.height)
    if img.width >= img.height:
        new_width, new_height = longest_side, max(1, round(img.height * scale))
    else:
        new_width, new_height = max(1, round(img.width * scale)), longest_side
    return img.resize((new_width, new_height), Image.Resampling.LANCZOS)
