"""Main entry point for the RX console."""

import os
from pathlib import Path

import uvicorn
from dotenv import load_dotenv

from rxconsole.api import create_fastapi_app
from rxconsole.logging_config import setup_logging


def main():
    """Run the console API."""
    project_root = Path(__file__).resolve().parent.parent
    load_dotenv(project_root / ".env")
    setup_logging()

    api_host = os.getenv("API_HOST", "localhost")
    api_port = int(os.getenv("API_PORT", "8080"))

    app = create_fastapi_app()

    uvicorn.run(
        app,
        host=api_host,
        port=api_port,
        log_level="info",
        log_config=None,  # keep the JSON handlers from setup_logging
    )


if __name__ == "__main__":
    main()
