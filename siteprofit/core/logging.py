# siteprofit/core/logging.py
# -----------------------------------------------------------------------------
# Loguru based logging setup
# - stderr sink always, rotating file sink when LOG_TO_FILE is on
# -----------------------------------------------------------------------------
import sys
from pathlib import Path

from loguru import logger

from siteprofit.core.config import Settings


def setup_logging(cfg: Settings) -> None:
    logger.remove()  # drop the default handler
    logger.add(sys.stderr, level=cfg.LOG_LEVEL)

    if cfg.LOG_TO_FILE:
        log_dir = Path(cfg.LOG_DIR)
        log_dir.mkdir(exist_ok=True, parents=True)
        logger.add(
            log_dir / "app.log",
            rotation="10 MB",
            retention="10 files",
            enqueue=True,  # safe across worker processes
            backtrace=True,
            diagnose=True,
            level=cfg.LOG_LEVEL,
        )
