import json
from pathlib import Path
from typing import Any, Dict, Union

import yaml


def from_json_or_yaml(filepath: Union[str, Path]) -> Dict[str, Any]:
    """
    Load a mapping from a JSON or YAML file, chosen by the file extension.

    Args:
    filepath (str | Path): Path to a ``.json``, ``.yaml`` or ``.yml`` file.

    Returns:
    data (dict): The parsed content; an empty dict for an empty YAML file.
    """
    path = Path(filepath)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    suffix = path.suffix.lower()
    with path.open("r", encoding="utf-8") as f:
        if suffix == ".json":
            return json.load(f)
        if suffix in (".yaml", ".yml"):
            return yaml.safe_load(f) or {}
    raise ValueError(f"Unsupported config file format: {path.suffix}")
