# ocgui/bridge.py

"""
The callback bridge between native handlers and toolkit events.

remi calls back into Python through listener objects attached to event slots
(`widget.onclick.do(listener)`). Every listener this package attaches is a
CallableAdapter made by `EventBridge._adapter`, whose receiver turns
the raw toolkit call into an `Event` and hands it to `EventBridge.dispatch`.
Dispatch looks up the one handler registered for the (widget, kind) pair and
calls it with typed arguments.
"""

import logging
import types
import weakref
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Callable, Dict, Optional, Tuple

from .errors import BridgeCallError
from .toolkit import NO_VALUE, ForeignValue, is_foreign_convertible

if TYPE_CHECKING:
    from .base import Control

logger = logging.getLogger(__name__)

ClickHandler = Callable[["Control"], Any]
ChangeHandler = Callable[["Control", Any], Any]
Handler = Callable[..., Any]


class CallableAdapter:
    """
    A native function the toolkit can call as one of its own.

    The adapter keeps no state between calls, so the toolkit may re-enter it
    from a nested dispatch. Results are converted for the toolkit: `None`
    becomes NO_VALUE and widgets become their toolkit objects.

    Exceptions never pass through silently. With `swallow_errors=True` (event
    handlers) they are logged and the call returns NO_VALUE so the server keeps
    serving. With `swallow_errors=False` (app lifecycle) they are logged and
    re-raised as BridgeCallError.

    Stored on a class, the adapter binds like a method: the instance is passed
    as the first argument.

    :param function: The native callable.
    :param swallow_errors: Log and drop exceptions instead of re-raising.
    :param name: Label used in log messages.
    """
    __slots__ = ("function", "swallow_errors", "name")

    def __init__(self, function: Callable[..., Any], *, swallow_errors: bool = True, name: Optional[str] = None):
        if not callable(function):
            raise TypeError(f"{function!r} is not callable")
        self.function = function
        self.swallow_errors = swallow_errors
        self.name = name or getattr(function, "__qualname__", None) or repr(function)

    def __call__(self, *args, **kwargs) -> ForeignValue:
        try:
            result = self.function(*args, **kwargs)
        except Exception as e:
            if self.swallow_errors:
                logger.exception("Callback %s raised; the event was dropped.", self.name)
                return NO_VALUE
            logger.exception("Callback %s raised.", self.name)
            raise BridgeCallError(f"{self.name} failed: {e}") from e
        if result is None:
            return NO_VALUE
        if is_foreign_convertible(result):
            return result.foreign_value
        return result

    def __get__(self, instance, owner=None):
        if instance is None:
            return self
        return types.MethodType(self, instance)

    def __repr__(self):
        return f"CallableAdapter({self.name})"


class EventKind(Enum):
    """
    The events a widget can report, with the toolkit slot each one uses by
    default. Widgets may map a kind to a different slot.
    """
    CLICK = "onclick"
    CHANGE = "onchange"
    SELECTION = "onselection"
    CONFIRM = "confirm_dialog"
    CANCEL = "cancel_dialog"

    @property
    def default_slot(self) -> str:
        return self.value

    @property
    def carries_value(self) -> bool:
        """Whether handlers of this kind receive the widget's new value."""
        return self in (EventKind.CHANGE, EventKind.SELECTION)


@dataclass(frozen=True)
class Event:
    """
    One toolkit event on its way to a native handler.

    `new_value` is read back from the widget when the event is received;
    `payload` keeps whatever arguments the toolkit passed, for logging only.
    """
    kind: EventKind
    widget: "Control"
    new_value: Any = None
    payload: Tuple[Any, ...] = field(default=(), compare=False)


@dataclass
class EventRegistration:
    """The handler registered for one event kind on one widget."""
    kind: EventKind
    slot: str
    handler: Handler


class EventBridge:
    """
    Connects widget event slots to native handlers.

    One handler is kept per (widget, kind). Registering again replaces the
    previous handler; the toolkit connection is made once and reused.

    Registrations are keyed weakly by the toolkit object, not by the Control
    wrapping it. The listener handed to the toolkit holds the Control, so a
    widget built in a local variable keeps its handlers for as long as the
    toolkit keeps the widget, and any wrapper of the same object finds them.
    """

    def __init__(self):
        self._registrations: "weakref.WeakKeyDictionary[ForeignValue, Dict[EventKind, EventRegistration]]" = weakref.WeakKeyDictionary()

    def attach(self, widget: "Control", kind: EventKind, handler: Handler) -> EventRegistration:
        """
        Register `handler` for `kind` events on `widget`.

        :return: The registration now in effect.
        """
        if not callable(handler):
            raise TypeError(f"Event handler {handler!r} is not callable")
        slot = widget.slot_for(kind)
        per_widget = self._registrations.setdefault(widget.foreign_value, {})
        current = per_widget.get(kind)
        if current is not None:
            logger.debug("Replacing %s handler on %r", kind.name, widget)
            current.handler = handler
            return current

        widget.toolkit.connect(widget.foreign_value, slot, self._adapter(widget, kind, slot))
        registration = EventRegistration(kind=kind, slot=slot, handler=handler)
        per_widget[kind] = registration
        logger.debug("Connected %s handler to %r via %r", kind.name, widget, slot)
        return registration

    def detach(self, widget: "Control", kind: EventKind) -> None:
        """Forget the handler for `kind` on `widget`; later events are ignored."""
        per_widget = self._registrations.get(widget.foreign_value)
        if per_widget is not None:
            per_widget.pop(kind, None)

    def registration_for(self, widget: "Control", kind: EventKind) -> Optional[EventRegistration]:
        per_widget = self._registrations.get(widget.foreign_value)
        if not per_widget:
            return None
        return per_widget.get(kind)

    def handler_for(self, widget: "Control", kind: EventKind) -> Optional[Handler]:
        registration = self.registration_for(widget, kind)
        return registration.handler if registration else None

    def dispatch(self, event: Event) -> ForeignValue:
        """
        Call the handler registered for the event, if any.

        Handler results are discarded; the toolkit always gets NO_VALUE.
        """
        registration = self.registration_for(event.widget, event.kind)
        if registration is None:
            logger.debug("No %s handler on %r", event.kind.name, event.widget)
            return NO_VALUE
        if event.kind.carries_value:
            registration.handler(event.widget, event.new_value)
        else:
            registration.handler(event.widget)
        return NO_VALUE

    def trigger(self, widget: "Control", kind: EventKind, *payload) -> ForeignValue:
        """
        Deliver an event as if the toolkit had fired the slot.

        Goes through the same kind of adapter as a real toolkit event, so a
        failing handler is logged and swallowed here too.
        """
        registration = self.registration_for(widget, kind)
        if registration is None:
            return NO_VALUE
        return self._adapter(widget, kind, registration.slot)(widget.foreign_value, *payload)

    def _adapter(self, widget: "Control", kind: EventKind, slot: str) -> CallableAdapter:
        def receive(emitter, *payload):
            new_value = widget.current_value() if kind.carries_value else None
            return self.dispatch(Event(kind=kind, widget=widget, new_value=new_value, payload=payload))

        receive.__qualname__ = f"receive_{kind.name.lower()}"
        return CallableAdapter(receive, name=f"{type(widget).__name__}.{slot}")


_default_bridge = EventBridge()


def get_bridge() -> EventBridge:
    """The bridge shared by every widget in the process."""
    return _default_bridge
