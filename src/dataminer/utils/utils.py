import logging
import pathlib
from logging.handlers import RotatingFileHandler
from typing import Any, Dict, Optional, Union

import yaml

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

DEFAULT_LOGGER_CONFIG = {
    "log_level": "INFO",
    "console_log": True,
    "file_log": False,
    "dir_logger": "logs",
    "N_log_keep": 5,
}


def load_yaml_config_file(
    config_file: Union[str, pathlib.Path],
    section: str,
    logger: Optional[logging.Logger] = None
) -> Dict[str, Any]:
    """
    Load one top-level section of a YAML configuration file.

    Returns an empty dict when the file or the section does not exist, so
    callers can fall back to their own defaults.
    """
    config_file = pathlib.Path(config_file)
    if not config_file.is_file():
        if logger:
            logger.debug(f"Config file {config_file} not found, using defaults")
        return {}

    with config_file.open("r", encoding="utf-8") as f:
        config = yaml.safe_load(f) or {}

    section_config = config.get(section) or {}
    if not section_config and logger:
        logger.debug(f"Section '{section}' not found in {config_file}")
    return section_config


def init_logger(
    config_file: Union[str, pathlib.Path],
    name: str = None
) -> logging.Logger:
    """
    Initialize a logger from the 'logger' section of the configuration file.

    Parameters
    ----------
    config_file : str or Path
        Path to the YAML configuration file.
    name : str, optional
        Logger name; the configured 'logger_name' is used if not given.

    Returns
    -------
    logging.Logger
        The configured logger.
    """
    logger_config = dict(DEFAULT_LOGGER_CONFIG)
    logger_config.update(load_yaml_config_file(config_file, "logger"))

    name = name or logger_config.get("logger_name", "dataminer")
    logger = logging.getLogger(name)
    level = logger_config["log_level"]
    logger.setLevel(level.upper() if isinstance(level, str) else int(level))

    # Avoid stacking handlers when called more than once for the same name
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    formatter = logging.Formatter(LOG_FORMAT)

    if logger_config["console_log"]:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    if logger_config["file_log"]:
        dir_logger = pathlib.Path(logger_config["dir_logger"])
        dir_logger.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            dir_logger / f"{name}.log",
            maxBytes=10 * 1024 * 1024,
            backupCount=logger_config["N_log_keep"],
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
