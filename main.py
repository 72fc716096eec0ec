import sys
import uvicorn
import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from kula.api.routes import router
from kula.config.settings import settings, validate_settings
from kula.core.twilio_handler import TwilioHandler
from kula.services.reply_service import ReplyService
from kula.services.speech_service import SpeechService
from kula.services.storage_service import StorageService

# Configure logging
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# Refuse to start without both provider credentials
try:
    validate_settings(settings)
except ValueError as e:
    logger.error(f"❌ FATAL ERROR: {str(e)}")
    sys.exit(1)

# Create FastAPI app
app = FastAPI(
    title="Kula Server",
    description="Text and voice companion for new mothers using Gemini, ElevenLabs and Twilio",
    version="1.0.0"
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# API clients are built once and shared by every request
reply_service = ReplyService(
    api_key=settings.GEMINI_API_KEY,
    model=settings.GEMINI_MODEL,
    base_url=settings.GEMINI_BASE_URL,
    max_output_tokens=settings.MAX_OUTPUT_TOKENS,
)
speech_service = SpeechService(
    api_key=settings.ELEVENLABS_API_KEY,
    voice_id=settings.ELEVENLABS_VOICE_ID,
    model_id=settings.ELEVENLABS_MODEL_ID,
    output_format=settings.ELEVENLABS_OUTPUT_FORMAT,
)
storage_service = StorageService(
    public_dir=settings.PUBLIC_DIR,
    public_base_url=settings.PUBLIC_BASE_URL,
)

app.state.reply_service = reply_service
app.state.twilio_handler = TwilioHandler(
    reply_service=reply_service,
    speech_service=speech_service,
    storage_service=storage_service,
    voice=settings.TWILIO_VOICE,
    gather_timeout=settings.GATHER_TIMEOUT,
)

app.include_router(router)

# Synthesized replies and other public assets; must stay after the API routes
app.mount("/", StaticFiles(directory=settings.PUBLIC_DIR), name="public")

if not settings.PUBLIC_BASE_URL:
    logger.warning("PUBLIC_BASE_URL not set, audio URLs will use the request host")

if __name__ == "__main__":
    # Get port from environment or use default
    port = settings.PORT

    logger.info(f"✅ Kula Server is listening on port {port}")
    uvicorn.run(app, host="0.0.0.0", port=port)
