"""Runs the audio-notes API under uvicorn."""

import uvicorn

from audio_notes.config import load_config
from audio_notes.logging import setup_logging

logger = setup_logging(__name__)


def main():
    """Starts the ASGI server on the configured address."""
    server = load_config().server
    logger.info(
        "Starting audio-notes service",
        extra={"host": server.host, "port": server.port},
    )
    uvicorn.run(
        "audio_notes.main:app",
        host=server.host,
        port=server.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
