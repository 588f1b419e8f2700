# utils/logger.py
"""
Centralized logging setup.

Every module asks for its own named logger via get_logger(__name__);
handlers are attached once to the "gallery" root logger.
"""
import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional

import config

ROOT_LOGGER = "gallery"

_configured = False


def setup_logging(level: Optional[str] = None, log_file: Optional[str] = None) -> logging.Logger:
     """Attach console (and optional rotating file) handlers to the app logger."""
     global _configured
     logger = logging.getLogger(ROOT_LOGGER)
     if _configured:
          return logger

     logger.setLevel(level or config.LOG_LEVEL)
     logger.handlers.clear()
     logger.propagate = False

     console_handler = logging.StreamHandler(sys.stdout)
     console_handler.setFormatter(logging.Formatter("[%(levelname)s] %(name)s: %(message)s"))
     logger.addHandler(console_handler)

     log_file = log_file or config.LOG_FILE
     if log_file:
          Path(log_file).parent.mkdir(parents=True, exist_ok=True)
          file_handler = logging.handlers.RotatingFileHandler(
               log_file,
               maxBytes=10 * 1024 * 1024,  # 10MB
               backupCount=5,
          )
          file_handler.setFormatter(logging.Formatter(
               "%(asctime)s [%(levelname)s] [%(name)s] %(message)s",
               datefmt="%Y-%m-%d %H:%M:%S",
          ))
          logger.addHandler(file_handler)

     _configured = True
     return logger


def get_logger(name: str) -> logging.Logger:
     """Get a child of the app logger, e.g. gallery.services.media_service"""
     setup_logging()
     return logging.getLogger(f"{ROOT_LOGGER}.{name}")
