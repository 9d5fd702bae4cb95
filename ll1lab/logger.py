"""Logging setup: colored console output plus an optional rotating log file."""

from __future__ import annotations

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

import colorlog

LOGGER_NAME = "ll1lab"

FILE_FORMAT = "[%(asctime)s] [%(levelname)-8s] [%(filename)s:%(lineno)d] %(message)s"
CONSOLE_FORMAT = "%(log_color)s[%(asctime)s] [%(levelname)-8s] [%(filename)s:%(lineno)d]%(reset)s %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _console_handler(console_level: str) -> logging.Handler:
	handler = colorlog.StreamHandler(sys.stderr)
	handler.setFormatter(
		colorlog.ColoredFormatter(
			CONSOLE_FORMAT,
			datefmt=DATE_FORMAT,
			reset=True,
			log_colors={
				"DEBUG": "blue",
				"INFO": "green",
				"WARNING": "yellow",
				"ERROR": "red",
				"CRITICAL": "red,bg_white",
			},
		)
	)
	handler.setLevel(console_level)
	return handler


def setup_logger(
	name: str = LOGGER_NAME,
	console_level: str = "WARNING",
	log_file: Optional[str] = None,
	file_level: str = "DEBUG",
	max_bytes: int = 10 * 1024 * 1024,
	backup_count: int = 5,
) -> logging.Logger:
	"""
	Configure the package logger.

	The console handler is attached once per logger name; later calls only
	adjust its level. A file handler is attached for every log file not
	already being written.
	"""
	log = logging.getLogger(name)
	log.setLevel(logging.DEBUG)

	file_handlers = [h for h in log.handlers if isinstance(h, RotatingFileHandler)]
	console_handlers = [h for h in log.handlers if not isinstance(h, RotatingFileHandler)]

	if console_handlers:
		for handler in console_handlers:
			handler.setLevel(console_level)
	else:
		log.addHandler(_console_handler(console_level))

	if log_file:
		path = Path(os.path.abspath(log_file))
		if all(h.baseFilename != str(path) for h in file_handlers):
			path.parent.mkdir(parents=True, exist_ok=True)
			file_handler = RotatingFileHandler(str(path), maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8")
			file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=DATE_FORMAT))
			file_handler.setLevel(file_level)
			log.addHandler(file_handler)

	return log


def get_logger(module: str) -> logging.Logger:
	# Child loggers inherit the handlers configured by setup_logger().
	return logging.getLogger(f"{LOGGER_NAME}.{module}")
