# logger_setup.py

import logging
import os
import json

LOGGER_NAME = "confetti"
DEFAULT_LEVEL = "INFO"
DEFAULT_FORMAT = "%(asctime)s - %(levelname)s - %(module)s - %(message)s"


def setup_logging(config_path='config.json'):
    """
    Configures the dedicated "confetti" logger from the run configuration.

    Output goes to the console and to runs/<run_id>/confetti.log next to the
    config file. The logger does not propagate to the root logger, so Numba's
    and pygame's own logging stays out of the run log.

    Data Contract:
    - Inputs: config_path (str) - Path to the JSON configuration file.
    - Outputs: the configured logging.Logger.
    - Side Effects:
        - Replaces (and closes) any handlers already on the "confetti" logger.
        - Creates the run's log directory.
    - Invariants: the config must contain 'run_id'. The 'logging' section is
      optional; 'level' and 'format' fall back to INFO and DEFAULT_FORMAT.
    """
    with open(config_path, 'r') as f:
        config = json.load(f)

    run_id = config['run_id']
    log_config = config.get('logging', {})

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(log_config.get('level', DEFAULT_LEVEL))
    logger.propagate = False

    # --- Log files live beside the config, one directory per run ---
    base_dir = os.path.dirname(os.path.abspath(config_path))
    log_dir = os.path.join(base_dir, 'runs', run_id)
    os.makedirs(log_dir, exist_ok=True)
    log_file = os.path.join(log_dir, 'confetti.log')

    formatter = logging.Formatter(log_config.get('format', DEFAULT_FORMAT))
    handlers = [logging.FileHandler(log_file), logging.StreamHandler()]

    # Re-running setup must not stack handlers or leak open log files.
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.info(f"Logging initialized. Run ID: {run_id}. Log file: {log_file}")
    return logger
