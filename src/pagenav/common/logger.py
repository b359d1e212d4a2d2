# logger.py
import logging
import logging.config
from pathlib import Path

from pagenav.util.file_utils import from_json_or_yaml

DEFAULT_LOGGER_CONFIG_PATH = Path(__file__).resolve().parent.parent / "configs" / "logger_config.yaml"


def setup_logging(
    config_file_path=None,
    log_file_path=None,
    verbose=False,
):
    """
    Loads logging config from 'config_file_path' (YAML or JSON) and sets up logging.
    Falls back to the packaged configs/logger_config.yaml when no path is given.
    Optionally override file handler's filename, and set root logger to DEBUG if 'verbose'.
    """
    config = from_json_or_yaml(config_file_path or DEFAULT_LOGGER_CONFIG_PATH)
    handlers = config.get("handlers", {})

    if log_file_path and "file_handler" in handlers:
        Path(log_file_path).parent.mkdir(parents=True, exist_ok=True)
        handlers["file_handler"]["filename"] = str(log_file_path)
    elif "file_handler" in handlers:
        # Without an explicit log file only the console handler stays active.
        handlers.pop("file_handler")
        for logger_cfg in [config.get("root", {}), *config.get("loggers", {}).values()]:
            if "file_handler" in logger_cfg.get("handlers", []):
                logger_cfg["handlers"].remove("file_handler")

    logging.config.dictConfig(config)

    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    return logging.getLogger("pagenav")
