from typing import Optional
import json
from fastapi import Depends, Form, Request, Response
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse, PlainTextResponse
from pydantic import ValidationError
from kula.api.dependencies import get_reply_service, get_twilio_handler
from kula.api.models import InteractRequest, InteractResponse
from kula.core.twilio_handler import TwilioHandler
from kula.services.reply_service import ReplyService
import logging

logger = logging.getLogger(__name__)


async def root():
    return PlainTextResponse("Kula Server is alive and running!")


async def health_check():
    """Health check endpoint"""
    return {"status": "healthy"}


async def read_message(request: Request) -> Optional[str]:
    """Pull `message` out of a JSON or form-encoded body, if there is one"""
    content_type = request.headers.get("content-type", "")
    if content_type.startswith(("application/x-www-form-urlencoded", "multipart/form-data")):
        form = await request.form()
        data = dict(form)
    else:
        body = await request.body()
        if not body:
            return None
        try:
            data = json.loads(body)
        except ValueError:
            return None

    if not isinstance(data, dict):
        return None
    try:
        return InteractRequest(**data).message
    except ValidationError:
        return None


async def interact(
    request: Request,
    reply_service: ReplyService = Depends(get_reply_service),
):
    """Text chat for the mobile app"""
    message = await read_message(request)
    if not message:
        return JSONResponse(
            status_code=400,
            content={"error": "Message is required."},
        )

    try:
        logger.info(f"[Text Interaction] Received: {message}")
        reply = await run_in_threadpool(reply_service.get_reply, message)
        logger.info(f"[Text Interaction] Sending: {reply}")
        return InteractResponse(reply=reply)
    except Exception as e:
        logger.error(f"❌ Error in /interact route: {str(e)}")
        return JSONResponse(
            status_code=500,
            content={"error": "Failed to get AI response."},
        )


async def handle_voice(twilio_handler: TwilioHandler = Depends(get_twilio_handler)):
    """Entry point when a caller dials in"""
    twiml = twilio_handler.handle_voice_call()
    return Response(content=twiml, media_type="application/xml")


async def handle_voice_result(
    request: Request,
    SpeechResult: Optional[str] = Form(None),
    twilio_handler: TwilioHandler = Depends(get_twilio_handler),
):
    """Handle the caller's transcribed speech from Twilio"""
    twiml = await twilio_handler.handle_speech_result(SpeechResult, str(request.base_url))
    return Response(content=twiml, media_type="application/xml")
