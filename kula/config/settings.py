import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()

# Project root directory
ROOT_DIR = Path(__file__).parent.parent.parent

GEMINI_OPENAI_BASE_URL = "https://generativelanguage.googleapis.com/v1beta/openai/"


class Settings:
    def __init__(self):
        # Provider credentials
        self.GEMINI_API_KEY: str = os.getenv("GEMINI_API_KEY")
        self.ELEVENLABS_API_KEY: str = os.getenv("ELEVENLABS_API_KEY")

        # Text generation
        self.GEMINI_MODEL: str = os.getenv("GEMINI_MODEL", "gemini-2.0-flash")
        self.GEMINI_BASE_URL: str = os.getenv("GEMINI_BASE_URL", GEMINI_OPENAI_BASE_URL)
        self.MAX_OUTPUT_TOKENS: int = int(os.getenv("MAX_OUTPUT_TOKENS", "500"))

        # Speech synthesis
        self.ELEVENLABS_VOICE_ID: str = os.getenv("ELEVENLABS_VOICE_ID", "eOHsvebhdtt0XFeHVMQY")
        self.ELEVENLABS_MODEL_ID: str = os.getenv("ELEVENLABS_MODEL_ID", "eleven_multilingual_v2")
        self.ELEVENLABS_OUTPUT_FORMAT: str = os.getenv("ELEVENLABS_OUTPUT_FORMAT", "mp3_44100_128")

        # Telephony
        self.TWILIO_VOICE: str = os.getenv("TWILIO_VOICE", "Polly.Salli")
        self.GATHER_TIMEOUT: int = int(os.getenv("GATHER_TIMEOUT", "3"))

        # Public audio hosting
        self.PUBLIC_BASE_URL: str = os.getenv("PUBLIC_BASE_URL")
        self.PUBLIC_DIR: str = os.getenv("PUBLIC_DIR", str(ROOT_DIR / "public"))

        # Server
        self.PORT: int = int(os.getenv("PORT", "3000"))
        self.LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()


def validate_settings(settings: Settings):
    """Validate that both provider credentials are present"""
    missing = []
    if not settings.GEMINI_API_KEY:
        missing.append("GEMINI_API_KEY")
    if not settings.ELEVENLABS_API_KEY:
        missing.append("ELEVENLABS_API_KEY")

    if missing:
        raise ValueError(f"API key missing from environment: {', '.join(missing)}")


settings = Settings()
