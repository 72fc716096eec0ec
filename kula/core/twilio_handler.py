from typing import Optional
from fastapi.concurrency import run_in_threadpool
from twilio.twiml.voice_response import VoiceResponse
from kula.services.reply_service import ReplyService
from kula.services.speech_service import SpeechService
from kula.services.storage_service import StorageService
import logging

logger = logging.getLogger(__name__)

GREETING = "Welcome to Kula. Please tell me how I can help you after the beep."
NO_INPUT_MESSAGE = "I did not hear anything. Goodbye."
ERROR_MESSAGE = "I had trouble processing your request. Please call again."


class TwilioHandler:
    def __init__(self, reply_service: ReplyService, speech_service: SpeechService,
                 storage_service: StorageService, voice: str = "Polly.Salli",
                 gather_timeout: int = 3, gather_action: str = "/handle-voice"):
        """Build TwiML for the voice routes on top of the shared services"""
        self.reply_service = reply_service
        self.speech_service = speech_service
        self.storage_service = storage_service
        self.voice = voice
        self.gather_timeout = gather_timeout
        self.gather_action = gather_action

    def handle_voice_call(self) -> str:
        """Greet the caller and ask Twilio to gather their speech."""
        response = VoiceResponse()
        response.say(GREETING, voice=self.voice)
        response.gather(
            input='speech',
            timeout=self.gather_timeout,
            action=self.gather_action,
            method='POST',
        )
        return str(response)

    async def handle_speech_result(self, speech_result: Optional[str],
                                   request_base_url: str = None) -> str:
        """Answer transcribed speech with a synthesized reply, then hang up.

        Ends in exactly one of: a no-input goodbye, a <Play> of the freshly
        stored reply, or a spoken apology when any step fails.
        """
        response = VoiceResponse()

        if speech_result:
            logger.info(f"🗣️  Caller said: {speech_result}")
            try:
                audio_url = await self._speak_reply(speech_result, request_base_url)
                logger.info(f"🔊 Playing audio from: {audio_url}")
                response.play(audio_url)
            except Exception as e:
                logger.error(f"Error processing voice request: {str(e)}")
                response.say(ERROR_MESSAGE, voice=self.voice)
        else:
            response.say(NO_INPUT_MESSAGE, voice=self.voice)

        response.hangup()
        return str(response)

    async def _speak_reply(self, speech_result: str, request_base_url: str) -> str:
        reply = await run_in_threadpool(self.reply_service.get_reply, speech_result)
        logger.info(f"🤖 Kula replied: {reply}")

        audio = await run_in_threadpool(self.speech_service.synthesize, reply)
        filename = await run_in_threadpool(self.storage_service.store_audio, audio)
        return self.storage_service.public_url(filename, request_base_url)
