from loguru import logger
import sys
from pathlib import Path


def enrich_record(record):
    # Shorten call sites under the cwd so log lines stay readable
    source = Path(record["file"].path)
    try:
        rel_path = source.relative_to(Path.cwd())
    except ValueError:
        rel_path = source
    record["extra"]["rel_path"] = str(rel_path)
    return True


def configure_logger(verbose: bool = False):
    logger.remove()
    logger.add(
        sys.stderr,
        format="<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | <cyan>{extra[rel_path]}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
        level="DEBUG" if verbose else "INFO",
        colorize=True,
        filter=enrich_record,
    )
