"""
Настройка логирования

Формат строк: время с миллисекундами, имя логгера, уровень, сообщение::

    2025-08-14 11:43:29,142 - src.currency.domain.pairs - DEBUG - Removed 2 pairs containing USD

Модули библиотеки пишут в logging.getLogger(__name__) и не настраивают
handlers сами; setup_logging вызывается приложением один раз при старте.
"""

import logging
import os
import time
from logging.handlers import RotatingFileHandler


LINE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Ротация файла логов: 5 MB x 5 backups
LOG_FILE_MAX_BYTES = 5 * 1024 * 1024
LOG_FILE_BACKUP_COUNT = 5


class MillisecondFormatter(logging.Formatter):
    """Форматтер, добавляющий миллисекунды к asctime: ``YYYY-MM-DD HH:MM:SS,mmm``."""

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:
        ct = self.converter(record.created)
        s = time.strftime(datefmt or DATE_FORMAT, ct)
        return f"{s},{int(record.msecs):03d}"


def setup_logging(level: int = logging.INFO, log_file: str | None = None) -> None:
    """
    Настроить корневой логгер: консоль + (опционально) ротируемый файл.

    Повторный вызов заменяет ранее установленные handlers.

    Args:
        level: Уровень логирования
        log_file: Путь к файлу логов (None - только консоль)
    """
    logger = logging.getLogger()
    logger.setLevel(level)

    for h in list(logger.handlers):
        logger.removeHandler(h)

    formatter = MillisecondFormatter(LINE_FORMAT, datefmt=DATE_FORMAT)

    ch = logging.StreamHandler()
    ch.setLevel(level)
    ch.setFormatter(formatter)
    logger.addHandler(ch)

    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        fh = RotatingFileHandler(
            log_file,
            maxBytes=LOG_FILE_MAX_BYTES,
            backupCount=LOG_FILE_BACKUP_COUNT,
            encoding="utf-8",
        )
        fh.setLevel(level)
        fh.setFormatter(formatter)
        logger.addHandler(fh)
