import logging

from config.settings import settings


def setup_logging(level: str | None = None) -> None:
    """Setup logging configuration for hosts that don't configure it themselves."""
    logging.basicConfig(
        level=getattr(logging, (level or settings.log_level).upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler()],
    )
