import os
import tempfile

# Credentials and paths must exist before main.py is imported
os.environ.setdefault("GEMINI_API_KEY", "test-gemini-key")
os.environ.setdefault("ELEVENLABS_API_KEY", "test-elevenlabs-key")
os.environ["PUBLIC_DIR"] = tempfile.mkdtemp(prefix="kula-public-")
os.environ["PUBLIC_BASE_URL"] = "https://kula.example.com"

import pytest
from fastapi.testclient import TestClient
from kula.core.twilio_handler import TwilioHandler
from kula.services.storage_service import StorageService
from main import app


class FakeReplyService:
    def __init__(self, reply="Pele, Mama. Rest well.", error=None):
        self.reply = reply
        self.error = error
        self.calls = []

    def get_reply(self, user_input):
        self.calls.append(user_input)
        if self.error:
            raise self.error
        return self.reply


class FakeSpeechService:
    def __init__(self, audio=b"ID3fake-mp3-bytes", error=None):
        self.audio = audio
        self.error = error
        self.calls = []

    def synthesize(self, text):
        self.calls.append(text)
        if self.error:
            raise self.error
        return self.audio


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def storage_service(tmp_path):
    return StorageService(public_dir=str(tmp_path), public_base_url="https://kula.example.com")


@pytest.fixture
def make_handler(storage_service):
    def _make(reply_service=None, speech_service=None):
        return TwilioHandler(
            reply_service=reply_service or FakeReplyService(),
            speech_service=speech_service or FakeSpeechService(),
            storage_service=storage_service,
        )
    return _make


@pytest.fixture
def failing_disk(monkeypatch):
    """Make audio writes fail after the file has been created"""
    import builtins

    def failing_open(path, mode="r", *args, **kwargs):
        with builtins.open(path, mode, *args, **kwargs):
            pass
        raise OSError("No space left on device")

    monkeypatch.setattr("kula.services.storage_service.open", failing_open, raising=False)
