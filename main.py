import logging

import uvicorn
from dotenv import load_dotenv

load_dotenv()

from querybridge.config import settings  # noqa: E402
from querybridge.main import app  # noqa: E402

logger = logging.getLogger(__name__)


if __name__ == "__main__":
    logger.info(f"Backend running on port {settings.port}")
    uvicorn.run(app, host="0.0.0.0", port=settings.port, log_level=settings.log_level.lower())
