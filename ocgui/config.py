# ocgui/config.py
import importlib
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import yaml

logger = logging.getLogger(__name__)

CONFIG_FILE = "config.yaml"
EMBEDDED_MODULE = "_embedded_config"

DEFAULTS: Dict[str, Any] = {
    "title": "OCGUI",
    "address": "127.0.0.1",
    "port": 0,
    "res_dir": "res",
    "start_browser": True,
    "multiple_instance": False,
    "update_interval": 0.1,
    "standalone": False,
    "win_width": 1024,
    "win_height": 768,
    "log_level": "INFO",
    "log_file": None,
}

Settings = Dict[str, Any]


class Config:
    """
    Settings for an ocgui application, layered over DEFAULTS.

    Two sources are looked at, in order of preference:

      - an embedded module (`_embedded_config` by default) defining a
        `CONFIG` dict, which packaged apps ship instead of a file;
      - a YAML mapping in `config.yaml`, found as given or relative to the
        working directory.

    The first one that loads wins. With neither, the defaults apply.

        cfg = Config()
        cfg.get("port")                     # 0 unless configured
        cfg.get_nested("server.host", "")   # dotted lookup into mappings
    """

    def __init__(self, config_file: str = CONFIG_FILE, prefer_embedded: bool = True,
                 embedded_module_name: str = EMBEDDED_MODULE):
        self.config_file = config_file
        self.prefer_embedded = bool(prefer_embedded)
        self.embedded_module_name = embedded_module_name
        self._path = self._find_file(config_file)
        self._values: Settings = dict(DEFAULTS)
        self._source: Optional[str] = None
        self.reload()

    @classmethod
    def from_dict(cls, values: Settings) -> "Config":
        """Settings given in code, over the defaults. Nothing is read from disk."""
        cfg = cls.__new__(cls)
        cfg.config_file = None
        cfg.prefer_embedded = False
        cfg.embedded_module_name = None
        cfg._path = None
        cfg._values = {**DEFAULTS, **values}
        cfg._source = "dict"
        return cfg

    def reload(self, prefer_embedded: Optional[bool] = None) -> None:
        """Read the settings again. `prefer_embedded` overrides the order once."""
        prefer = self.prefer_embedded if prefer_embedded is None else bool(prefer_embedded)
        loaders = (self._read_embedded, self._read_file)
        if not prefer:
            loaders = loaders[::-1]

        for loader in loaders:
            loaded = loader()
            if loaded is not None:
                self._source, values = loaded
                self._values = {**DEFAULTS, **values}
                return
        self._source = None
        self._values = dict(DEFAULTS)

    def as_dict(self) -> Settings:
        return dict(self._values)

    def get(self, key: str, default: Any = None) -> Any:
        """The value of `key`, or `default` when it is missing or null."""
        value = self._values.get(key)
        return default if value is None else value

    def get_nested(self, path: str, default: Any = None, sep: str = ".") -> Any:
        """Look up "a.b.c" through nested mappings."""
        node: Any = self._values
        for part in path.split(sep) if path else ():
            if not isinstance(node, dict) or part not in node:
                return default
            node = node[part]
        return default if node is self._values else node

    @property
    def source(self) -> Optional[str]:
        """Where the settings came from: 'embedded', 'file', 'dict' or None."""
        return self._source

    @property
    def is_embedded(self) -> bool:
        return self._source == "embedded"

    @property
    def resolved_config_path(self) -> Optional[Path]:
        return self._path

    @staticmethod
    def _find_file(config_file: str) -> Optional[Path]:
        path = Path(config_file)
        if not path.is_absolute():
            path = Path.cwd() / path
        return path.resolve() if path.exists() else None

    def _read_embedded(self) -> Optional[Tuple[str, Settings]]:
        try:
            module = importlib.import_module(self.embedded_module_name)
        except ModuleNotFoundError:
            return None
        values = getattr(module, "CONFIG", None)
        if not isinstance(values, dict):
            logger.warning("Ignoring %s: CONFIG is not a dict", self.embedded_module_name)
            return None
        logger.debug("Using embedded settings from %s", self.embedded_module_name)
        return "embedded", values

    def _read_file(self) -> Optional[Tuple[str, Settings]]:
        if self._path is None:
            return None
        try:
            with self._path.open("r", encoding="utf-8") as fh:
                values = yaml.safe_load(fh) or {}
        except (OSError, yaml.YAMLError):
            logger.warning("Could not read %s", self._path, exc_info=True)
            return None
        if not isinstance(values, dict):
            logger.warning("Ignoring %s: the top level is not a mapping", self._path)
            return None
        logger.debug("Using settings from %s", self._path)
        return "file", values


_shared: Optional[Config] = None


def get_config(**kwargs) -> Config:
    """
    The Config shared by the process, created on first use.

    Keyword arguments only take effect on that first call.
    """
    global _shared
    if _shared is None:
        _shared = Config(**kwargs)
    return _shared
