from __future__ import annotations

import uvicorn

from documented_api import config
from documented_api.app import create_app
from documented_api.logging_setup import setup_logging

setup_logging(level=config.LOG_LEVEL, log_file=config.LOG_FILE)

app = create_app()


if __name__ == "__main__":
    # reload needs the import string "main:app" to watch files
    uvicorn.run(
        "main:app",
        host=config.APP_HOST,
        port=config.APP_PORT,
        reload=config.APP_RELOAD,
        log_config=None,
    )
