# File: src/evm_wallet_api/monitoring/logging_config.py

import logging
import logging.handlers
import os
from datetime import datetime
from typing import Optional

PACKAGE_LOGGER = "evm_wallet_api"
HANDLER_MARKER = "_evm_wallet_api_handler"

class LogConfig:
    def __init__(
        self,
        log_dir: Optional[str] = None,
        level: str = "INFO",
        max_size: int = 10 * 1024 * 1024,  # 10MB
        backup_count: int = 5
    ):
        self.log_dir = log_dir
        self.level = logging.getLevelName(level.upper())
        self.max_size = max_size
        self.backup_count = backup_count

        if log_dir and not os.path.exists(log_dir):
            os.makedirs(log_dir)

    def setup_logging(self) -> logging.Logger:
        console_formatter = logging.Formatter(
            '%(asctime)s - %(levelname)s - %(name)s - %(message)s'
        )
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(console_formatter)
        console_handler.setLevel(self.level)

        root_logger = logging.getLogger()
        root_logger.setLevel(self.level)
        # Replace handlers from an earlier setup instead of stacking them
        for handler in list(root_logger.handlers):
            if getattr(handler, HANDLER_MARKER, False):
                root_logger.removeHandler(handler)
                handler.close()
        setattr(console_handler, HANDLER_MARKER, True)
        root_logger.addHandler(console_handler)

        if self.log_dir:
            file_formatter = logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            )
            log_file = os.path.join(
                self.log_dir,
                f'evm_wallet_api_{datetime.now().strftime("%Y%m%d")}.log'
            )
            file_handler = logging.handlers.RotatingFileHandler(
                log_file,
                maxBytes=self.max_size,
                backupCount=self.backup_count
            )
            file_handler.setFormatter(file_formatter)
            file_handler.setLevel(logging.DEBUG)
            setattr(file_handler, HANDLER_MARKER, True)
            root_logger.addHandler(file_handler)

        # Module loggers created before setup carry their own stream handler
        for name, logger in logging.root.manager.loggerDict.items():
            if name.startswith(PACKAGE_LOGGER) and isinstance(logger, logging.Logger):
                logger.handlers.clear()
                logger.setLevel(logging.NOTSET)

        return root_logger
