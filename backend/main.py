# backend/main.py
import logging
import sys

import uvicorn

from brand_check.config import settings

logger = logging.getLogger(__name__)


def run() -> None:
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if not settings.GEMINI_API_KEY:
        logger.error("ERROR: GEMINI_API_KEY is not set in environment variables")
        sys.exit(1)

    base = f"http://localhost:{settings.PORT}"
    logger.info(f"✅ Backend running on port {settings.PORT}")
    logger.info(f"✅ Health check: {base}/health")
    logger.info(f"✅ API endpoint: {base}/api/check")

    uvicorn.run("backend.app:app", host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())


if __name__ == "__main__":
    run()
