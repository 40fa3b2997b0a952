#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
================================================================================
Logging Configuration Tests
================================================================================

Author:         Ryan Kamp
Affiliation:    University of Cincinnati Department of Computer Science
Email:          kamprj@mail.uc.edu
GitHub:         https://github.com/ryanjosephkamp

Created:        October 17, 2026
License:        MIT License
================================================================================
"""

import logging
import pytest
from coilfield.geometry import CoilGeometry
from coilfield.field_lines import FieldLineSetBuilder
from coilfield.logging_config import PACKAGE_LOGGER, setup_logging


@pytest.fixture
def package_logger():
    """Package logger, restored to an unconfigured state afterwards."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)


class TestSetupLogging:
    """Tests for package logger setup."""

    def test_console_handler(self, package_logger):
        """One stdout handler at the requested level."""
        logger = setup_logging(logging.WARNING)
        assert logger is package_logger
        assert logger.level == logging.WARNING
        assert len(logger.handlers) == 1
        assert logger.handlers[0].level == logging.WARNING

    def test_repeated_setup_replaces_handlers(self, package_logger):
        """Calling setup twice does not duplicate output."""
        setup_logging(logging.INFO)
        setup_logging(logging.DEBUG)
        assert len(package_logger.handlers) == 1
        assert package_logger.level == logging.DEBUG

    def test_file_handler(self, package_logger, tmp_path):
        """Records from library modules reach the log file."""
        log_file = tmp_path / "coil.log"
        setup_logging(logging.INFO, str(log_file))
        assert len(package_logger.handlers) == 2

        builder = FieldLineSetBuilder()
        builder.compute_field_lines(CoilGeometry(radius=0.0, length=0.1, turns=5, current=5.0))
        for handler in package_logger.handlers:
            handler.flush()

        text = log_file.read_text(encoding="utf-8")
        assert "coilfield.field_lines - WARNING - Degenerate coil geometry" in text
        assert "Traced 0 field lines" in text

    def test_level_filters_records(self, package_logger, tmp_path):
        """Records below the level are not written."""
        log_file = tmp_path / "coil.log"
        setup_logging(logging.WARNING, str(log_file))
        logging.getLogger("coilfield.field_lines").info("not shown")
        logging.getLogger("coilfield.field_lines").warning("shown")
        for handler in package_logger.handlers:
            handler.flush()

        text = log_file.read_text(encoding="utf-8")
        assert "shown" in text
        assert "not shown" not in text


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
