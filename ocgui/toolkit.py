# ocgui/toolkit.py

"""
Access to the remi toolkit.

Every widget, event connection and server call goes through a Toolkit. The
toolkit holds the imported `remi` and `remi.gui` modules and exposes the small
object protocol the rest of the package is written against:

    construct(class_name, *args, **kwargs) -> object
    get_attribute(object, name) -> value
    set_attribute(object, name, value)
    call_method(object, name, *args, **kwargs) -> value
    connect(object, slot, callback)

A process installs one toolkit with `use()` before building any widget.
`get_toolkit()` imports remi on first use when nothing was installed.
"""

import logging
from typing import Any, Optional, Protocol, runtime_checkable

logger = logging.getLogger(__name__)

# Any value living in the toolkit: a widget object, a string, a number, a
# bool, None or a callable.
ForeignValue = Any

# What the toolkit receives when a native callback has nothing to return.
NO_VALUE = None

_PRIMITIVES = (str, int, float, bool, type(None))


@runtime_checkable
class ForeignConvertible(Protocol):
    """Anything that can present itself as a toolkit value."""

    @property
    def foreign_value(self) -> ForeignValue:
        ...


def is_foreign_convertible(value: Any) -> bool:
    """
    Report whether `value` can present a toolkit object.

    Plain native data (strings, numbers, lists, dicts) does not count, even
    though the toolkit would accept it as an argument.
    """
    if isinstance(value, type):
        return False
    return isinstance(value, ForeignConvertible)


def to_foreign(value: Any) -> ForeignValue:
    """
    Convert a native value into something the toolkit accepts.

    :raises TypeError: for values that are neither primitives nor convertible.
    """
    if is_foreign_convertible(value):
        return value.foreign_value
    if isinstance(value, _PRIMITIVES):
        return value
    if isinstance(value, (list, tuple)):
        return [to_foreign(item) for item in value]
    if isinstance(value, dict):
        return {key: to_foreign(item) for key, item in value.items()}
    raise TypeError(f"Cannot pass a {type(value).__name__} to the toolkit.")


class Toolkit:
    """
    The remi modules, passed around explicitly.

    :param remi: the top level `remi` module (App, Server, start).
    :param gui: the `remi.gui` module (widget classes).
    """

    def __init__(self, remi, gui):
        self.remi = remi
        self.gui = gui

    @classmethod
    def load(cls) -> "Toolkit":
        """Import remi and wrap it."""
        import remi
        import remi.gui as gui
        logger.debug("Loaded remi toolkit from %s", getattr(remi, "__file__", "?"))
        return cls(remi, gui)

    # --- object protocol ---

    def construct(self, class_name: str, *args, **kwargs) -> ForeignValue:
        widget_class = getattr(self.gui, class_name)
        return widget_class(*args, **kwargs)

    def get_attribute(self, obj: ForeignValue, name: str) -> ForeignValue:
        return getattr(obj, name)

    def set_attribute(self, obj: ForeignValue, name: str, value: ForeignValue) -> None:
        setattr(obj, name, value)

    def call_method(self, obj: ForeignValue, name: str, *args, **kwargs) -> ForeignValue:
        return getattr(obj, name)(*args, **kwargs)

    def connect(self, obj: ForeignValue, slot: str, callback) -> None:
        """Attach `callback` to the event slot `slot` (e.g. "onclick") of `obj`."""
        self.get_attribute(obj, slot).do(callback)

    # --- application / server ---

    @property
    def app_base(self) -> type:
        """The toolkit class every synthesized app class derives from."""
        return self.remi.App

    def server(self, app_class: type, **options) -> ForeignValue:
        """Create a server for `app_class` without starting it."""
        options.setdefault("start", False)
        return self.remi.Server(app_class, **options)

    def __repr__(self):
        return f"Toolkit(remi={getattr(self.remi, '__name__', self.remi)!r})"


_installed: Optional[Toolkit] = None


def use(toolkit: Optional[Toolkit]) -> Optional[Toolkit]:
    """
    Install the toolkit used by widgets that are not given one explicitly.

    Returns the previously installed toolkit so callers (mostly tests) can
    restore it.
    """
    global _installed
    previous = _installed
    _installed = toolkit
    return previous


def get_toolkit() -> Toolkit:
    """Return the installed toolkit, importing remi if none was installed."""
    global _installed
    if _installed is None:
        _installed = Toolkit.load()
    return _installed
