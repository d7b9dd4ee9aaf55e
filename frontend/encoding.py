# encoding.py - Uploaded image handling
import base64
import io
import logging
import mimetypes
from dataclasses import dataclass
from typing import Optional

from PIL import Image, UnidentifiedImageError

from frontend.config import PREVIEW_SIZE

logger = logging.getLogger(__name__)

DEFAULT_MIME_TYPE = "image/jpeg"


@dataclass
class UploadedImage:
    """A user-selected image held for one analysis request."""
    name: str
    mime_type: str
    data: bytes

    @classmethod
    def from_upload(cls, uploaded_file):
        """Build from a Streamlit UploadedFile"""
        name = getattr(uploaded_file, "name", "image.jpg")
        mime_type = getattr(uploaded_file, "type", None) or guess_mime_type(name)
        return cls(name=name, mime_type=mime_type, data=uploaded_file.getvalue())


@dataclass
class GenerativePart:
    """Base64 encoded image ready to be sent as JSON."""
    mime_type: str
    data: str

    def to_payload(self):
        return {"mime_type": self.mime_type, "data": self.data}


def guess_mime_type(filename: str) -> str:
    mime_type, _ = mimetypes.guess_type(filename)
    if mime_type and mime_type.startswith("image/"):
        return mime_type
    return DEFAULT_MIME_TYPE


def file_to_generative_part(image: UploadedImage) -> GenerativePart:
    """Read the image bytes as base64 text"""
    if not image.data:
        raise ValueError(f"Uploaded file '{image.name}' is empty")
    encoded = base64.b64encode(image.data).decode("ascii")
    return GenerativePart(mime_type=image.mime_type, data=encoded)


def make_preview(image: UploadedImage, size=PREVIEW_SIZE) -> Optional[Image.Image]:
    """Create a display thumbnail, or None when the bytes are not a readable image"""
    try:
        preview = Image.open(io.BytesIO(image.data))
        preview.load()
    except (UnidentifiedImageError, OSError) as e:
        logger.warning(f"Cannot build preview for {image.name}: {str(e)}")
        return None

    if preview.mode not in ("RGB", "RGBA"):
        preview = preview.convert("RGB")
    preview.thumbnail(size)
    return preview
