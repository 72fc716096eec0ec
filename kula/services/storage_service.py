import logging
import os
import uuid

logger = logging.getLogger(__name__)


class StorageService:
    """Writes synthesized replies into the public asset directory.

    Files are served by the static mount at the site root, so a file's
    public URL is the base URL followed by its name. Files are never
    removed by the service.
    """

    def __init__(self, public_dir: str, public_base_url: str = None):
        self.public_dir = public_dir
        self.public_base_url = public_base_url
        os.makedirs(self.public_dir, exist_ok=True)

    def store_audio(self, audio: bytes, extension: str = "mp3") -> str:
        """
        Store audio bytes under a unique file name

        Args:
            audio (bytes): Encoded audio content
            extension (str): File extension without the dot

        Returns:
            str: Name of the written file, relative to the public directory
        """
        if not audio:
            raise ValueError("Refusing to store empty audio")

        filename = f"reply_{uuid.uuid4().hex}.{extension}"
        path = os.path.join(self.public_dir, filename)
        try:
            with open(path, "wb") as f:
                f.write(audio)
        except OSError:
            # Never leave a truncated file behind
            if os.path.exists(path):
                os.remove(path)
            raise

        logger.info(f"Stored audio at: {path}")
        return filename

    def public_url(self, filename: str, request_base_url: str = None) -> str:
        """Build the URL Twilio uses to fetch a stored file"""
        base_url = self.public_base_url or request_base_url
        if not base_url:
            raise ValueError("No public base URL available for audio playback")
        return f"{base_url.rstrip('/')}/{filename}"
