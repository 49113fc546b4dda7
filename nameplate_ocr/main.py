"""Application entry point for the nameplate OCR API server."""

import uvicorn

from nameplate_ocr.api.app import app
from nameplate_ocr.utils.config import load_config
from nameplate_ocr.utils.logger import setup_logging


def main() -> None:
    """Start the FastAPI application server."""
    config = load_config()
    setup_logging(config.log_level)
    uvicorn.run(app, host=config.api.host, port=config.api.port)


if __name__ == "__main__":
    main()
