import logging

import uvicorn

from home_inventory.api.api_run import app
from home_inventory.utilities.config import APP_HOST, APP_PORT, LOG_LEVEL

logger = logging.getLogger(__name__)


if __name__ == "__main__":
    logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logger.info(f"Uvicorn running on http://localhost:{APP_PORT} (Press CTRL+C to quit)")
    uvicorn.run(app, host=APP_HOST, port=APP_PORT, log_level=LOG_LEVEL.lower())
