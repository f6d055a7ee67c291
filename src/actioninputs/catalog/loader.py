"""
Loading of action-type catalogs.

A catalog is JSON or YAML holding either a list of action types or an object
with an ``actions`` list. Each entry follows ``ActionType``'s camelCase wire
names, for example::

    {
      "actions": [
        {
          "uid": "astro.getElevation",
          "label": "get the elevation",
          "inputs": [{"name": "date", "type": "java.time.ZonedDateTime"}],
          "outputs": [{"name": "elevation", "type": "QuantityType"}]
        }
      ]
    }
"""

import json
from pathlib import Path
from typing import Any, List, Optional, Union

from pydantic import TypeAdapter

from actioninputs.catalog.registry import ActionTypeRegistry
from actioninputs.core.exceptions import CatalogLoadError
from actioninputs.core.logger import get_logger
from actioninputs.models.action_type import ActionType

logger = get_logger(__name__)

_ACTION_LIST = TypeAdapter(List[ActionType])


def _read_file(config_path: Union[str, Path]) -> Any:
    config_file = Path(config_path)
    if not config_file.exists():
        raise FileNotFoundError(f"Catalog file not found: {config_path}")

    with open(config_file, "r", encoding="utf-8") as f:
        if config_file.suffix == ".json":
            return json.load(f)
        if config_file.suffix in (".yaml", ".yml"):
            try:
                import yaml
            except ImportError as exc:
                raise ImportError(
                    "PyYAML required for YAML catalogs. "
                    "Install with: pip install 'actioninputs[yaml]'"
                ) from exc
            return yaml.safe_load(f)
    raise CatalogLoadError(
        f"Unsupported catalog format: {config_file.suffix}. Use .json or .yaml",
        details={"path": str(config_path)},
    )


def load_catalog(
    config_path: Optional[Union[str, Path]] = None,
    config_data: Optional[Any] = None,
) -> List[ActionType]:
    """
    Load and validate action types from a catalog file or in-memory data.

    Args:
        config_path: Path to a JSON/YAML catalog file
        config_data: Already-parsed catalog (list or ``{"actions": [...]}``)

    Returns:
        The validated action types, in catalog order

    Raises:
        FileNotFoundError: If the catalog file doesn't exist
        CatalogLoadError: If neither source is given or the shape is unknown
        pydantic.ValidationError: If an action type is malformed
    """
    if config_data is not None:
        data = config_data
    elif config_path is not None:
        data = _read_file(config_path)
        logger.info(f"Loaded action catalog from {config_path}")
    else:
        raise CatalogLoadError("Either config_path or config_data must be provided")

    if isinstance(data, dict):
        if "actions" not in data:
            raise CatalogLoadError("Catalog object must contain an 'actions' list", details={"keys": sorted(data)})
        data = data["actions"]
    if not isinstance(data, list):
        raise CatalogLoadError(f"Catalog must be a list of action types, got {type(data).__name__}")

    return _ACTION_LIST.validate_python(data)


def register_catalog(
    config_path: Optional[Union[str, Path]] = None,
    config_data: Optional[Any] = None,
    *,
    overwrite: bool = False,
) -> List[ActionType]:
    action_types = load_catalog(config_path, config_data)
    for action_type in action_types:
        ActionTypeRegistry.register(action_type, overwrite=overwrite)
    logger.debug(f"Registered {len(action_types)} action type(s)")
    return action_types
