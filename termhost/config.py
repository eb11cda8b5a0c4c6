# config.py
from __future__ import annotations
import copy
import logging
from pathlib import Path
from typing import Any, Dict, Optional
import yaml

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = "termhost.yaml"

# Construction defaults are attribute bags, applied before the caller's bag.
DEFAULTS: Dict[str, Any] = {
    "log_level": "WARNING",
    "defaults": {
        "box": {
            "position": "absolute",
            "x": 0,
            "y": 0,
            "width": 20,
            "height": 10,
            "border": True,
            "backgroundColor": "#141428",
            "borderColor": "#ffffff",
        },
        "group": {
            "position": "relative",
            "x": 0,
            "y": 0,
            "width": "auto",
            "height": "auto",
        },
        "text": {
            "position": "relative",
            "x": 0,
            "y": 0,
            "width": "auto",
            "height": "auto",
            "content": "",
            "selectable": True,
        },
        "input": {
            "position": "relative",
            "x": 0,
            "y": 0,
            "width": 20,
            "height": 3,
            "value": "",
        },
    },
    "surface": {
        "backgroundColor": "#0a0f23",
    },
}


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


class Config:
    """
    Singleton config loader: built-in defaults, overlaid with a YAML file
    (default name: termhost.yaml) when one can be found.

    Usage:
        cfg = Config()
        level = cfg.get("log_level", "WARNING")
        width = cfg.get_nested("defaults.box.width", 20)
        cfg.reload("other.yaml")    # re-read, optionally from another file
    """

    _instance: Optional["Config"] = None

    def __new__(cls, *args, **kwargs):
        if cls._instance is None:
            cls._instance = super(Config, cls).__new__(cls)
        return cls._instance

    def __init__(self, config_file: str = DEFAULT_CONFIG_FILE):
        # initialize only once
        if getattr(self, "_initialized", False):
            return

        self._initialized = True
        self._config: Dict[str, Any] = {}
        self._source: Optional[str] = None  # 'defaults' or 'file'
        self._resolved_config_path: Optional[Path] = None
        self.reload(config_file)

    # ----- public API -----
    def reload(self, config_file: Optional[str] = None) -> None:
        """
        Re-read the configuration. A new ``config_file`` replaces the one
        given at construction.
        """
        if config_file is not None:
            self.config_file_arg = str(config_file)
            self._resolved_config_path = self._resolve_config_path(self.config_file_arg)

        self._config = copy.deepcopy(DEFAULTS)
        self._source = "defaults"
        self._try_load_file()

    def as_dict(self) -> Dict[str, Any]:
        """Return the loaded configuration as a dict."""
        return copy.deepcopy(self._config)

    def get(self, key: str, default: Any = None) -> Any:
        """Shallow lookup in the top-level config dict."""
        return self._config.get(key, default)

    def get_nested(self, path: str, default: Any = None, sep: str = ".") -> Any:
        """
        Lookup nested keys using dot-path (e.g. "defaults.box.width").
        Returns default if any step is missing.
        """
        cur = self._config
        if not path:
            return default
        for part in path.split(sep):
            if not isinstance(cur, dict) or part not in cur:
                return default
            cur = cur[part]
        return cur

    @property
    def source(self) -> Optional[str]:
        """Return 'defaults'|'file' depending on where config came from."""
        return self._source

    @property
    def resolved_config_path(self) -> Optional[Path]:
        """If a filesystem config was resolved, return its Path, otherwise None."""
        return self._resolved_config_path

    # ----- internal helpers -----
    def _resolve_config_path(self, config_file: str) -> Optional[Path]:
        """
        Try to resolve the YAML config path:
          1. config_file is absolute and exists
          2. relative to the project root (parent of this package)
          3. relative to this package
          4. relative to cwd
        """
        candidate = Path(config_file)
        if candidate.is_absolute():
            return candidate.resolve() if candidate.exists() else None

        here = Path(__file__).resolve().parent
        for base in (here.parent, here, Path.cwd()):
            path = (base / config_file).resolve()
            if path.exists():
                return path
        return None

    def _try_load_file(self) -> bool:
        """Overlay the YAML file on the defaults. Returns True on success."""
        if not self._resolved_config_path:
            return False
        with self._resolved_config_path.open("r", encoding="utf-8") as fh:
            data = yaml.safe_load(fh)
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ValueError(
                f"{self._resolved_config_path}: expected a mapping at the top level, got {type(data).__name__}"
            )
        self._config = _deep_merge(self._config, data)
        self._source = "file"
        logger.debug("Loaded configuration from %s", self._resolved_config_path)
        return True


def get_config(*args, **kwargs) -> Config:
    """
    Convenience factory that returns the singleton Config instance.
    Arguments forwarded to Config() only on the first call.
    """
    return Config(*args, **kwargs)
