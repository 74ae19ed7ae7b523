"""
Text-to-speech via OpenAI.

Returns MP3 bytes for a piece of text. The client is built on first use so
the app starts fine without an API key; only /speak needs one.
"""

import logging
from typing import Optional

from openai import OpenAI

from .config import settings

logger = logging.getLogger(__name__)


class SpeechError(Exception):
    """Speech could not be produced (no key, no text, or provider failure)."""


class SpeechSynthesizer:

    def __init__(self, api_key: str = "", model: str = "gpt-4o-mini-tts",
                 default_voice: str = "alloy", client=None):
        self.api_key = api_key
        self.model = model
        self.default_voice = default_voice
        self._client = client

    @property
    def client(self):
        if self._client is None:
            if not self.api_key:
                raise SpeechError("OPENAI_API_KEY not configured")
            self._client = OpenAI(api_key=self.api_key)
        return self._client

    def synthesize(self, text: str, voice: Optional[str] = None) -> bytes:
        """Speak `text` with `voice` (default voice if omitted). Returns audio/mpeg bytes."""
        if not text or not text.strip():
            raise SpeechError("No text to speak")
        try:
            audio = self.client.audio.speech.create(
                model=self.model,
                voice=voice or self.default_voice,
                input=text,
            )
            return audio.content
        except SpeechError:
            raise
        except Exception as e:
            raise SpeechError(f"Speech provider call failed: {e}") from e


def get_speech_synthesizer() -> SpeechSynthesizer:
    """FastAPI dependency: synthesizer configured from settings."""
    return SpeechSynthesizer(
        api_key=settings.OPENAI_API_KEY,
        model=settings.TTS_MODEL,
        default_voice=settings.TTS_DEFAULT_VOICE,
    )
