# career_advisor/run_app.py
import logging
import sys

from career_advisor import create_app
from career_advisor.config import Settings
from career_advisor.errors import ConfigError, StoreError

logger = logging.getLogger("career_advisor")


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    try:
        settings = Settings.from_env()
    except ConfigError as e:
        logger.error("%s. Please check your .env file.", e.message)
        sys.exit(1)
    logging.getLogger().setLevel(settings.log_level)

    try:
        app = create_app(settings)
    except StoreError as e:
        logger.error("Database connection failed: %s", e.message)
        sys.exit(1)

    logger.info("Backend running on http://localhost:%s", settings.port)
    app.run(host="0.0.0.0", port=settings.port, threaded=True)


if __name__ == "__main__":
    main()
