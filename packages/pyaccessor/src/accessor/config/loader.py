import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

if sys.version_info < (3, 11):
    import tomli as tomllib
else:
    import tomllib

from accessor.core import Accessor
from accessor.flags import WrapFlags, parse_flags

log = logging.getLogger(__name__)


@dataclass
class AccessorConfig:
    flags: WrapFlags = WrapFlags.ARRAY

    def access(self, value: Any) -> Accessor:
        return Accessor(value, self.flags)


def _find_pyproject_toml(search_path: Path) -> Path:
    current_dir = search_path.resolve()
    while True:
        pyproject_path = current_dir / "pyproject.toml"
        if pyproject_path.is_file():
            return pyproject_path
        if current_dir.parent == current_dir:
            break
        current_dir = current_dir.parent
    raise FileNotFoundError("Could not find pyproject.toml in any parent directory.")


def load_config_from_path(search_path: Path) -> AccessorConfig:
    try:
        config_path = _find_pyproject_toml(search_path)
    except FileNotFoundError:
        return AccessorConfig()

    with open(config_path, "rb") as f:
        data = tomllib.load(f)
    accessor_data: Dict[str, Any] = data.get("tool", {}).get("accessor", {})
    log.debug(f"Loaded [tool.accessor] from {config_path}: {accessor_data}")

    if "wrap" not in accessor_data:
        return AccessorConfig()
    return AccessorConfig(flags=parse_flags(accessor_data["wrap"]))
