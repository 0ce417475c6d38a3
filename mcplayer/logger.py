import gzip
import logging
import logging.handlers
import shutil
import sys
from pathlib import Path

from .config import settings

logger = logging.getLogger("mcplayer")
logger.setLevel(logging.DEBUG)
formatter = logging.Formatter(
    "%(asctime)s %(levelname)s [%(module)s:%(funcName)s:%(lineno)d] %(message)s"
)


def gzip_rotated_log(source: str, dest: str) -> None:
    """Compress a rotated log file to ``dest.gz`` and drop the plain copy."""
    rotated = Path(source)
    with rotated.open("rb") as plain, gzip.open(f"{dest}.gz", "wb") as packed:
        shutil.copyfileobj(plain, packed)
    rotated.unlink()


if settings.log_to_file:
    settings.logs_dir.mkdir(parents=True, exist_ok=True)
    log_file_handler = logging.handlers.TimedRotatingFileHandler(
        settings.logs_dir / "mcplayer.log", when="midnight"
    )
    log_file_handler.setFormatter(formatter)
    log_file_handler.rotator = gzip_rotated_log
    logger.addHandler(log_file_handler)

log_stream_handler = logging.StreamHandler(sys.stdout)
log_stream_handler.setFormatter(formatter)
if settings.log_to_stdout:
    logger.addHandler(log_stream_handler)
