# ocgui/runtime.py
import logging
import os
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, Optional

from .config import Config, get_config
from .delegate import AppDelegate, DelegateDescriptor, DelegateSynthesizer
from .errors import AlreadyBuiltError, SynthesisError
from .log import setup_logging
from .toolkit import ForeignValue, Toolkit, get_toolkit

if TYPE_CHECKING:
    from .widgets import Dialog

logger = logging.getLogger(__name__)

SAFE_TO_CLOSE_TITLE = "Safe to close"
SAFE_TO_CLOSE_MESSAGE = "The application has stopped. You can now close this window."


class AppHandle:
    """
    One browser session of a running app, as seen by `AppDelegate.main()`.

    Wraps the remi App instance of that session. Pass it to `Dialog.show()`
    and call `close()` on it to stop the application.
    """

    def __init__(self, app: ForeignValue, runtime: "AppRuntime"):
        self._app = app
        self._runtime = runtime

    @property
    def foreign_value(self) -> ForeignValue:
        return self._app

    @property
    def runtime(self) -> "AppRuntime":
        return self._runtime

    def show(self, dialog: "Dialog") -> None:
        dialog.show(self)

    def close(self) -> None:
        """
        Show the "safe to close" notice and stop the server.

        Nothing waits for the browser to acknowledge the notice.
        """
        from .widgets import Dialog

        notice = Dialog(SAFE_TO_CLOSE_TITLE, SAFE_TO_CLOSE_MESSAGE, toolkit=self._runtime.toolkit)
        notice.confirm_button.enabled = False
        notice.cancel_button.enabled = False
        notice.show(self)
        logger.info("Closing %s", self._runtime.app_name)
        self._runtime.toolkit.call_method(self._app, "close")
        self._runtime._mark_closed()

    def __repr__(self):
        return f"AppHandle({self._app!r})"


class RuntimeState(Enum):
    NEW = "new"
    SERVING = "serving"
    CLOSED = "closed"


class AppRuntime:
    """
    Runs one application delegate.

    `start()` synthesizes the remi App class, starts the server and blocks
    until `close()` is called from a handler. An AppRuntime starts once.

    :param delegate: The application.
    :param config: Settings; the shared Config by default.
    :param toolkit: The remi toolkit; the installed one by default.
    """

    def __init__(self, delegate: AppDelegate, config: Optional[Config] = None, toolkit: Optional[Toolkit] = None):
        self.delegate = delegate
        self.config = config or get_config()
        self.toolkit = toolkit or get_toolkit()
        self.state = RuntimeState.NEW
        self.synthesizer: Optional[DelegateSynthesizer] = None
        self.descriptor: Optional[DelegateDescriptor] = None
        self.app_class: Optional[type] = None
        self.server: Optional[ForeignValue] = None
        self.session: Optional[AppHandle] = None

    @property
    def app_name(self) -> str:
        return type(self.delegate).__name__

    @property
    def res_path(self) -> str:
        res_dir = Path(self.config.get("res_dir", "res"))
        if not res_dir.is_absolute():
            res_dir = Path(os.getcwd()) / res_dir
        return str(res_dir)

    def _make_handle(self, app: ForeignValue) -> AppHandle:
        self.session = AppHandle(app, self)
        return self.session

    def build(self) -> type:
        """
        Synthesize the App class without starting a server.

        :raises AlreadyBuiltError: if this runtime was already built.
        :raises SynthesisError: if the descriptor is empty or invalid.
        """
        if self.synthesizer is not None:
            raise AlreadyBuiltError(f"{self.app_name} has already been started")
        self.synthesizer = DelegateSynthesizer(self.delegate, self.res_path, self._make_handle, self.toolkit)
        self.descriptor = self.synthesizer.build()
        if not self.descriptor:
            raise SynthesisError(f"Nothing to synthesize for {self.app_name}")
        self.app_class = self.synthesizer.register_class(self.descriptor)
        logger.info("Synthesized %s with %d widget field(s)", self.app_name, len(self.descriptor.field_names))
        return self.app_class

    def server_options(self) -> Dict[str, Any]:
        standalone = bool(self.config.get("standalone", False))
        return {
            "title": self.config.get("title", self.app_name),
            "address": self.config.get("address", "127.0.0.1"),
            "port": int(self.config.get("port", 0)),
            "multiple_instance": bool(self.config.get("multiple_instance", False)),
            "update_interval": float(self.config.get("update_interval", 0.1)),
            "start_browser": bool(self.config.get("start_browser", True)) and not standalone,
        }

    def start(self) -> None:
        """Build, start the server and serve until closed."""
        setup_logging(self.config)
        app_class = self.build()
        options = self.server_options()
        self.server = self.toolkit.server(app_class, **options)
        self.server.start()
        self.state = RuntimeState.SERVING
        logger.info("Serving %s on %s:%s", self.app_name, options["address"], options["port"])

        if self.config.get("standalone", False):
            self._run_window()
        else:
            self.server.serve_forever()
        self._mark_closed()

    def _run_window(self) -> None:
        from .window import open_window

        # remi reports the bound address once started, which matters for port 0.
        url = getattr(self.server, "address", None) or "http://{address}:{port}/".format(**self.server_options())
        try:
            open_window(
                url,
                title=self.config.get("title", self.app_name),
                width=int(self.config.get("win_width", 1024)),
                height=int(self.config.get("win_height", 768)),
            )
        finally:
            self.server.stop()

    def close(self) -> None:
        """
        Stop the application. Call this from an event handler.

        Closes the most recent session (see AppHandle.close); without a
        session the server is stopped directly.
        """
        if self.state is RuntimeState.CLOSED:
            return
        if self.session is not None:
            self.session.close()
        elif self.server is not None:
            self.server.stop()
            self._mark_closed()

    def _mark_closed(self) -> None:
        self.state = RuntimeState.CLOSED
