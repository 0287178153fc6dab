import base64
import binascii

from magicquill_client.errors import InvalidImageError


def is_data_uri(data):
    """
    Check if the provided string is a base64 data URI
    """
    return isinstance(data, str) and data.startswith("data:") and ";base64," in data


def make_data_uri(raw: bytes, mime: str = "image/png") -> str:
    return f"data:{mime};base64,{base64.b64encode(raw).decode('ascii')}"


def remove_b64_header(data):
    """
    Remove the header from a data URI and fix the base64 padding.
    Plain base64 strings are returned unchanged.
    """
    if data.startswith("data:"):
        img_b64 = data.split(",", 1)[-1]
        img_b64 = "".join(img_b64.split())
        padding = len(img_b64) % 4
        if padding:
            img_b64 += "=" * (4 - padding)
        return img_b64
    return data


def decode_data_uri(data: str) -> bytes:
    if not data:
        raise InvalidImageError("Empty image data")
    try:
        return base64.b64decode(remove_b64_header(data), validate=True)
    except (binascii.Error, ValueError) as e:
        raise InvalidImageError(f"Invalid base64 image data: {e}") from e


def split_prompt(text: str) -> list[str]:
    """
    Split a comma-separated prompt into its trimmed, non-empty phrases.
    """
    return [phrase.strip() for phrase in text.split(",") if phrase.strip()]
