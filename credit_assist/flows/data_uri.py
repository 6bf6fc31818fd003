"""
Data URI helpers for bill images.

Bill images travel to the bill parser as a single string of the form
``data:<mime-type>;base64,<payload>``. These helpers build and take apart
such strings and identify image types from their leading bytes.
"""

import base64
import binascii
import re
from dataclasses import dataclass
from typing import Optional

from credit_assist.utils.constants import SUPPORTED_IMAGE_MIME_TYPES

_DATA_URI_PATTERN = re.compile(
    r"^data:(?P<mime>[\w.+-]+/[\w.+-]+);base64,(?P<payload>[A-Za-z0-9+/]+={0,2})$"
)


@dataclass(frozen=True)
class DecodedDataUri:
    mime_type: str
    data: bytes


def sniff_image_mime(data: bytes) -> Optional[str]:
    """Identify PNG, JPEG or WEBP content from its magic bytes."""
    if data.startswith(b"\x89PNG\r\n\x1a\n"):
        return "image/png"
    if data.startswith(b"\xff\xd8\xff"):
        return "image/jpeg"
    if len(data) >= 12 and data[:4] == b"RIFF" and data[8:12] == b"WEBP":
        return "image/webp"
    return None


def to_data_uri(data: bytes, mime_type: str) -> str:
    """Encode raw bytes as a base64 data URI."""
    encoded = base64.b64encode(data).decode("ascii")
    return f"data:{mime_type};base64,{encoded}"


def parse_data_uri(value: str) -> DecodedDataUri:
    """
    Decode a bill image data URI.

    Raises:
        ValueError: if the string is not ``data:<mime>;base64,<payload>``,
            the MIME type is not a supported image type, the payload is not
            valid base64, or the decoded bytes are not an image of the
            declared type.
    """
    match = _DATA_URI_PATTERN.match(value.strip())
    if not match:
        raise ValueError("must be a data URI of the form 'data:<mimetype>;base64,<encoded_data>'")

    mime_type = match.group("mime").lower()
    if mime_type not in SUPPORTED_IMAGE_MIME_TYPES:
        raise ValueError(
            f"unsupported image type '{mime_type}', expected one of "
            f"{', '.join(SUPPORTED_IMAGE_MIME_TYPES)}"
        )

    try:
        data = base64.b64decode(match.group("payload"), validate=True)
    except (binascii.Error, ValueError):
        raise ValueError("payload is not valid base64")

    detected = sniff_image_mime(data)
    if detected != mime_type:
        raise ValueError(f"payload does not contain a {mime_type} image")

    return DecodedDataUri(mime_type=mime_type, data=data)
