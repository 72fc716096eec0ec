import logging
from elevenlabs.client import ElevenLabs

logger = logging.getLogger(__name__)


class SpeechService:
    def __init__(self, api_key: str, voice_id: str, model_id: str,
                 output_format: str = "mp3_44100_128", client: ElevenLabs = None):
        if not api_key and client is None:
            raise ValueError("ELEVENLABS_API_KEY not set in environment variables")

        self.client = client or ElevenLabs(api_key=api_key)
        self.voice_id = voice_id
        self.model_id = model_id
        self.output_format = output_format

    def synthesize(self, text: str) -> bytes:
        """Convert text to speech and return the whole audio stream as bytes"""
        audio_gen = self.client.text_to_speech.convert(
            voice_id=self.voice_id,
            text=text,
            model_id=self.model_id,
            output_format=self.output_format,
        )

        chunks = [chunk for chunk in audio_gen if chunk]
        raw_audio = b"".join(chunks)

        logger.info(f"Synthesized {len(raw_audio)} bytes of audio")
        return raw_audio
