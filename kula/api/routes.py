from fastapi import APIRouter
from kula.api.models import InteractResponse, ErrorResponse
from .endpoints import (
    root,
    health_check,
    interact,
    handle_voice,
    handle_voice_result,
)

router = APIRouter()

router.add_api_route("/", root, methods=["GET"])
router.add_api_route("/health", health_check, methods=["GET"])
# Text chat used by the mobile app
router.add_api_route(
    "/interact",
    interact,
    methods=["POST"],
    response_model=InteractResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
# Twilio voice webhooks
router.add_api_route("/voice", handle_voice, methods=["POST"])
router.add_api_route("/handle-voice", handle_voice_result, methods=["POST"])
