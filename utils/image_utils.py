from __future__ import annotations

import base64
import binascii
import io
import logging
from typing import Optional, Tuple

from PIL import Image, UnidentifiedImageError

logger = logging.getLogger(__name__)

FALLBACK_MIME = "application/octet-stream"

_CANONICAL_MIMES: dict[str, str] = {
    "image/jpg": "image/jpeg",
}

_MAGIC_SIGNATURES: tuple[tuple[bytes, str], ...] = (
    (b"\x89PNG\r\n\x1a\n", "image/png"),
    (b"\xff\xd8\xff", "image/jpeg"),
    (b"GIF87a", "image/gif"),
    (b"GIF89a", "image/gif"),
    (b"BM", "image/bmp"),
)

_WEBP_CONTAINER_PREFIX = b"RIFF"
_WEBP_TAG = b"WEBP"

MSG_INVALID_IMAGE = "Invalid image data"
MSG_IMAGE_DIMENSIONS = "Image dimensions too large"


def detect_mime_from_bytes(raw: bytes) -> Optional[str]:
    for magic, mime in _MAGIC_SIGNATURES:
        if raw.startswith(magic):
            return mime

    if raw.startswith(_WEBP_CONTAINER_PREFIX) and len(raw) >= 12 and raw[8:12] == _WEBP_TAG:
        return "image/webp"

    return None


def detect_image_mime(image_b64: str) -> Optional[str]:
    """Best-effort mime detection using file signatures."""

    try:
        header = base64.b64decode(image_b64[:96], validate=True)
    except (binascii.Error, ValueError):
        return None
    return detect_mime_from_bytes(header)


def split_data_url(value: str) -> Tuple[Optional[str], str]:
    """Split ``data:<mime>;base64,<payload>`` into (mime, payload); bare base64 gives (None, value)."""

    if not value.startswith("data:"):
        return None, value.strip()
    header, sep, payload = value.partition(",")
    if not sep or ";base64" not in header:
        raise ValueError(MSG_INVALID_IMAGE)
    mime = header[len("data:"):].split(";", 1)[0]
    return _normalize_mime(mime), payload.strip()


def to_data_url(image_b64: str, mime: str) -> str:
    """Wrap base64 data into a data URL understood by the chat completions API."""

    return f"data:{mime};base64,{image_b64}"


def file_to_data_url(raw: bytes, mime: Optional[str] = None) -> str:
    """Encode an uploaded file the way a browser FileReader.readAsDataURL would."""

    resolved = _normalize_mime(mime) or detect_mime_from_bytes(raw) or FALLBACK_MIME
    return to_data_url(base64.b64encode(raw).decode("utf-8"), resolved)


def normalize_image(value: str, max_bytes: int = 0) -> str:
    """
    Validate one incoming image string and return it as a data URL.

    Accepts a data URL or bare base64. Raises ValueError carrying the
    client-facing message when the payload is not a decodable image or
    exceeds ``max_bytes`` (0 means unlimited).
    """
    hint, payload = split_data_url(value)
    if hint and not hint.startswith("image/"):
        raise ValueError(MSG_INVALID_IMAGE)

    try:
        raw = base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise ValueError(MSG_INVALID_IMAGE) from exc
    if not raw:
        raise ValueError(MSG_INVALID_IMAGE)

    if max_bytes and len(raw) > max_bytes:
        raise ValueError(f"Image too large (max {_format_size(max_bytes)})")

    try:
        with Image.open(io.BytesIO(raw)) as img:
            image_format = img.format
            img.verify()
    except Image.DecompressionBombError as exc:
        raise ValueError(MSG_IMAGE_DIMENSIONS) from exc
    except (UnidentifiedImageError, OSError, SyntaxError) as exc:
        raise ValueError(MSG_INVALID_IMAGE) from exc

    mime = hint or detect_image_mime(payload) or Image.MIME.get(image_format or "")
    if not mime:
        raise ValueError(MSG_INVALID_IMAGE)
    if hint is None:
        logger.debug("Detected mime %s for bare base64 image", mime)
    return to_data_url(payload, mime)


def _format_size(num_bytes: int) -> str:
    mb = 1024 * 1024
    if num_bytes >= mb and num_bytes % mb == 0:
        return f"{num_bytes // mb}MB"
    return f"{num_bytes} bytes"


def _normalize_mime(value: Optional[str]) -> Optional[str]:
    if not value:
        return None
    normalized = value.strip().lower()
    return _CANONICAL_MIMES.get(normalized, normalized)
