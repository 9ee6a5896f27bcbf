"""Helpers for inspecting encoded image payloads."""

import io

from PIL import Image, ImageOps, UnidentifiedImageError


def detect_mime_type(image_bytes: bytes) -> str:
    """Infer a basic image MIME type from file signatures."""
    if image_bytes.startswith(b"\xff\xd8\xff"):
        return "image/jpeg"
    if image_bytes.startswith(b"\x89PNG\r\n\x1a\n"):
        return "image/png"
    if image_bytes[:4] == b"RIFF" and image_bytes[8:12] == b"WEBP":
        return "image/webp"
    return "image/jpeg"


def image_dimensions(image_bytes: bytes) -> tuple[int, int] | None:
    """Return upright (width, height) of an encoded image, if readable.

    EXIF orientation is applied, so a portrait photo stored sideways reports
    its displayed size.
    """
    try:
        with Image.open(io.BytesIO(image_bytes)) as image:
            upright = ImageOps.exif_transpose(image)
            return upright.size
    except (UnidentifiedImageError, OSError):
        return None
