import base64
import logging
from typing import Optional

from google import genai
from google.genai import types

logger = logging.getLogger(__name__)


class GeminiClient:
    """
    Stateless worker for Gemini API interactions.
    Does not depend on DB or Flask Context directly.

    Errors from the SDK (``google.genai.errors.APIError``) propagate so the
    caller can classify and retry them.
    """

    def __init__(self, api_key: str, text_model: str = 'gemini-2.5-flash',
                 image_model: str = 'imagen-3.0-generate-002'):
        self.text_model = text_model
        self.image_model = image_model
        self._client = genai.Client(api_key=api_key)

    def generate_json(self, prompt: str, temperature: float = 0.5) -> str:
        """Raw text of a JSON-mode completion."""
        response = self._client.models.generate_content(
            model=self.text_model,
            contents=prompt,
            config=types.GenerateContentConfig(
                response_mime_type='application/json',
                temperature=temperature,
            ),
        )
        return (response.text or '').strip()

    def generate_image(self, prompt: str) -> Optional[str]:
        """Base64 JPEG of one generated image, or None when the response has no bytes."""
        response = self._client.models.generate_images(
            model=self.image_model,
            prompt=prompt,
            config=types.GenerateImagesConfig(number_of_images=1, output_mime_type='image/jpeg'),
        )
        images = response.generated_images or []
        if not images or not images[0].image or not images[0].image.image_bytes:
            logger.warning("Image response carried no image bytes")
            return None
        return base64.b64encode(images[0].image.image_bytes).decode('ascii')

    def create_chat(self, system_instruction: str):
        """A chat session; ``send_message(text).text`` gives the reply."""
        return self._client.chats.create(
            model=self.text_model,
            config=types.GenerateContentConfig(system_instruction=system_instruction),
        )
