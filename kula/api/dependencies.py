from fastapi import Request
from kula.core.twilio_handler import TwilioHandler
from kula.services.reply_service import ReplyService


# Services are built once in main.py and kept on app.state
def get_reply_service(request: Request) -> ReplyService:
    return request.app.state.reply_service


def get_twilio_handler(request: Request) -> TwilioHandler:
    return request.app.state.twilio_handler
