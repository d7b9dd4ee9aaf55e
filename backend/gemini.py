# gemini.py - Thin async wrapper around the Gemini client
import logging
import time
from typing import Optional

from google import genai
from google.genai import types

logger = logging.getLogger(__name__)


class EmptyResponseError(RuntimeError):
    """Raised when the model returns no text"""


class GeminiModel:
    """One configured Gemini model, used for both image analysis and translation."""

    def __init__(self, api_key: str, model_name: str):
        self.model_name = model_name
        self.client = genai.Client(api_key=api_key)

    async def generate_text(
        self,
        prompt: str,
        image: Optional[bytes] = None,
        mime_type: Optional[str] = None,
    ) -> str:
        """Send the prompt (and optional inline image) and return the generated text"""
        contents = [prompt]
        if image is not None:
            contents.append(
                types.Part.from_bytes(data=image, mime_type=mime_type or "image/jpeg")
            )

        start_time = time.time()
        response = await self.client.aio.models.generate_content(
            model=self.model_name,
            contents=contents,
        )
        elapsed = time.time() - start_time

        text = (response.text or "").strip()
        if not text:
            logger.error(f"{self.model_name} returned an empty response after {elapsed:.3f}s")
            raise EmptyResponseError(f"{self.model_name} returned no text")

        logger.info(f"{self.model_name} responded with {len(text)} characters in {elapsed:.3f}s")
        return text
