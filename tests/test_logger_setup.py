# test_logger_setup.py

import json
import logging

import logger_setup


def test_setup_logging_writes_to_run_directory(tmp_path):
    config_path = tmp_path / "config.json"
    config_path.write_text(json.dumps({
        "run_id": "unit",
        "logging": {"level": "DEBUG", "format": "%(levelname)s %(message)s"},
    }))

    logger = logger_setup.setup_logging(str(config_path))
    try:
        assert logger is logging.getLogger("confetti")
        assert logger.level == logging.DEBUG
        assert logger.propagate is False
        assert len(logger.handlers) == 2

        # Calling it again must not stack handlers.
        logger_setup.setup_logging(str(config_path))
        assert len(logger.handlers) == 2

        logger.info("hello confetti")
        for handler in logger.handlers:
            handler.flush()
        log_file = tmp_path / "runs" / "unit" / "confetti.log"
        assert "hello confetti" in log_file.read_text()
    finally:
        for handler in list(logger.handlers):
            handler.close()
        logger.handlers.clear()
