import logging
import sys
from typing import Optional, TextIO
from stock_sentiment.config import settings

def setup_logging(level: Optional[str] = None, stream: TextIO = sys.stdout):
    logging.basicConfig(
        level=level or settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[
            logging.StreamHandler(stream)
        ]
    )
    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.info("Logging configured.")

def get_logger(name: str):
    return logging.getLogger(name)
