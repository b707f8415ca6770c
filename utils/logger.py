# utils/logger.py
import logging
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _shop_handlers(log_file: Path) -> list:
    # shop.log rolls over at midnight, a week of history is kept
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    file_handler = TimedRotatingFileHandler(
        filename=log_file, when="midnight", backupCount=7, encoding="utf-8"
    )
    console_handler = logging.StreamHandler()
    for handler in (file_handler, console_handler):
        handler.setFormatter(formatter)
    return [file_handler, console_handler]


def setup_logger(log_dir="data/logs", level: str = "INFO"):
    """
    Configure the "shop" logger for the product management demo.

    Product creation and reviews are logged by services.product_manager
    through the "shop.manager" child, which reaches the console and
    shop.log through this logger. The level comes from the "log_level"
    setting; unknown names fall back to INFO.
    """
    logger = logging.getLogger("shop")
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    # handlers are only attached once per process
    if logger.handlers:
        return logger

    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    for handler in _shop_handlers(log_dir / "shop.log"):
        logger.addHandler(handler)

    logger.info(f"Shop logging to {log_dir / 'shop.log'} at {logging.getLevelName(logger.level)}")
    return logger
