"""
Terminal client book.
Run: python -m clientbook (from repo root, with config.yaml / .env optional).
"""
import logging

from clientbook.infrastructure import configure_logging, load_env, load_settings
from clientbook.ui import run

logger = logging.getLogger(__name__)


def main() -> None:
    load_env()
    settings = load_settings()
    configure_logging(settings.log_level)
    logger.info("Starting clientbook with settings %s", settings)
    run(settings)


if __name__ == "__main__":
    main()
