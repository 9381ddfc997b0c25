# ocgui/log.py
import logging
from pathlib import Path
from typing import List, Optional

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "INFO", file_path: Optional[str] = None) -> None:
    """Send log records to the console and, optionally, to a file."""
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if file_path:
        path = Path(file_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(path, mode="a", encoding="utf-8", delay=True))

    formatter = logging.Formatter(LOG_FORMAT)
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(getattr(logging, str(level).upper(), logging.INFO))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)


def setup_logging(config=None) -> None:
    """Configure logging from `config` unless the application already did."""
    if logging.getLogger().handlers:
        return
    level = config.get("log_level", "INFO") if config is not None else "INFO"
    file_path = config.get("log_file") if config is not None else None
    configure_logging(level, file_path)
