"""
Logging System for DeskBurst
Provides centralized logging with file output and level controls
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

class DeskBurstLogger:
    _instance: Optional['DeskBurstLogger'] = None

    def __init__(self, log_dir: str = "logs", log_level: int = logging.INFO):
        if DeskBurstLogger._instance is not None:
            raise RuntimeError("DeskBurstLogger is a singleton. Use get_logger() instead.")

        self.log_dir = Path(log_dir)
        self.log_dir.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        self.log_file = self.log_dir / f"deskburst_{timestamp}.log"

        self.logger = logging.getLogger("DeskBurst")
        self.logger.setLevel(logging.DEBUG)

        if self.logger.handlers:
            self.logger.handlers.clear()

        file_handler = logging.FileHandler(self.log_file, encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)

        console_handler = logging.StreamHandler()
        console_handler.setLevel(log_level)

        formatter = logging.Formatter(
            '[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s',
            datefmt='%H:%M:%S'
        )
        file_handler.setFormatter(formatter)
        console_handler.setFormatter(formatter)

        self.logger.addHandler(file_handler)
        self.logger.addHandler(console_handler)

        DeskBurstLogger._instance = self
        self.debug("Logger initialized")

    def debug(self, message: str):
        self.logger.debug(message)

    def info(self, message: str):
        self.logger.info(message)

    def warning(self, message: str):
        self.logger.warning(message)

    def error(self, message: str, exc_info: bool = False):
        self.logger.error(message, exc_info=exc_info)

    @classmethod
    def get_instance(cls) -> 'DeskBurstLogger':
        if cls._instance is None:
            cls._instance = DeskBurstLogger()
        return cls._instance

    @classmethod
    def shutdown(cls):
        if cls._instance:
            for handler in list(cls._instance.logger.handlers):
                handler.close()
                cls._instance.logger.removeHandler(handler)
            cls._instance = None

def get_logger() -> DeskBurstLogger:
    return DeskBurstLogger.get_instance()

def init_logger(log_dir: str = "logs", log_level: int = logging.INFO):
    if DeskBurstLogger._instance is None:
        DeskBurstLogger(log_dir, log_level)
    return get_logger()
