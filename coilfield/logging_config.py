#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Logging Configuration
================================================================================

Project:        Magnetic Field Around a Coil
Module:         logging_config.py

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        October 17, 2026
Last Updated:   October 17, 2026

License:        MIT License
================================================================================

Sets up the logger for the coilfield package.
"""

import logging
import sys
from typing import Optional


PACKAGE_LOGGER = "coilfield"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%H:%M:%S'


def _make_handler(handler: logging.Handler, level: int) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    return handler


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Attach console (and optionally file) output to the package logger.

    Calling it again replaces the previous handlers, so Streamlit reruns
    and repeated CLI calls do not duplicate output.

    Args:
        level: Logging level, e.g. logging.DEBUG
        log_file: Optional path of a log file, overwritten on each call

    Returns:
        The configured 'coilfield' logger
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    logger.addHandler(_make_handler(logging.StreamHandler(sys.stdout), level))
    if log_file:
        logger.addHandler(_make_handler(
            logging.FileHandler(log_file, mode='w', encoding='utf-8'), level
        ))

    logger.debug("Logging initialized at level %s", logging.getLevelName(level))
    return logger
