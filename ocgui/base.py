# ocgui/base.py
import logging
from typing import Any, Dict, Optional, Union

from .bridge import ChangeHandler, ClickHandler, EventBridge, EventKind, EventRegistration, get_bridge
from .errors import ForeignStateError, SizeFormatError
from .toolkit import ForeignValue, Toolkit, get_toolkit, to_foreign
from .units import Size, SizeUnit, coerce_size_unit

logger = logging.getLogger(__name__)


class Control:
    """
    The base class for every widget.

    A Control owns exactly one toolkit object, created by the subclass
    constructor and never replaced. Two controls wrapping the same toolkit
    object are equal. Accessors always read the toolkit object; nothing is
    cached on the Python side.

    :param foreign_value: The toolkit object this control stands for.
    :param toolkit: The toolkit that created it (defaults to the installed one).
    """

    # Event kinds whose toolkit slot differs from EventKind.default_slot.
    event_slots: Dict[EventKind, str] = {}

    def __init__(self, foreign_value: ForeignValue, toolkit: Optional[Toolkit] = None):
        if foreign_value is None:
            raise ValueError(f"{type(self).__name__} needs a toolkit object")
        self._foreign = foreign_value
        self._toolkit = toolkit or get_toolkit()

    @classmethod
    def wrap(cls, foreign_value: ForeignValue, toolkit: Optional[Toolkit] = None) -> "Control":
        """Wrap an existing toolkit object without constructing a new one."""
        control = cls.__new__(cls)
        Control.__init__(control, foreign_value, toolkit)
        return control

    @staticmethod
    def _construct(toolkit: Optional[Toolkit], class_name: str, *args, **kwargs):
        """Create a toolkit object, returning it with the toolkit used."""
        toolkit = toolkit or get_toolkit()
        return toolkit.construct(class_name, *args, **kwargs), toolkit

    @property
    def foreign_value(self) -> ForeignValue:
        return self._foreign

    @property
    def toolkit(self) -> Toolkit:
        return self._toolkit

    @property
    def bridge(self) -> EventBridge:
        return get_bridge()

    def _call(self, name: str, *args, **kwargs) -> ForeignValue:
        return self._toolkit.call_method(self._foreign, name, *args, **kwargs)

    def _get(self, name: str) -> ForeignValue:
        return self._toolkit.get_attribute(self._foreign, name)

    @property
    def _style(self):
        return self._get("style")

    # --- state ---

    @property
    def enabled(self) -> bool:
        """If this is False, the user cannot interact with the control."""
        return "disabled" not in self._get("attributes")

    @enabled.setter
    def enabled(self, value: bool):
        self._call("set_enabled", bool(value))

    @property
    def visible(self) -> bool:
        """Whether the control is shown. Writes the CSS display property directly."""
        return self._style.get("display") != "none"

    @visible.setter
    def visible(self, value: bool):
        style = self._style
        if value:
            if "display" in style:
                del style["display"]
        else:
            style["display"] = "none"
        self.redraw()

    # --- size ---

    def _style_size(self, name: str) -> Optional[SizeUnit]:
        style = self._style
        if name not in style:
            return None
        raw = style[name]
        try:
            return SizeUnit.parse(str(raw))
        except SizeFormatError as e:
            raise ForeignStateError(f"{type(self).__name__} has an unreadable {name}: {raw!r}") from e

    @property
    def size(self) -> Optional[Size]:
        """The size of the control, or None when width or height is not set."""
        width = self._style_size("width")
        height = self._style_size("height")
        if width is None or height is None:
            return None
        return Size(width, height)

    @size.setter
    def size(self, value: Optional[Size]):
        if value is None:
            return
        self._call("set_size", str(value.width), str(value.height))
        self.redraw()

    @property
    def width(self) -> Optional[SizeUnit]:
        return self._style_size("width")

    @width.setter
    def width(self, value: Union[SizeUnit, str, int]):
        self._style["width"] = str(coerce_size_unit(value))
        self.redraw()

    @property
    def height(self) -> Optional[SizeUnit]:
        return self._style_size("height")

    @height.setter
    def height(self, value: Union[SizeUnit, str, int]):
        self._style["height"] = str(coerce_size_unit(value))
        self.redraw()

    # --- misc ---

    def set_style(self, *styles) -> None:
        """Apply one or more `ocgui.styles.Style` values to the control."""
        style = self._style
        for item in styles:
            for name, css_value in item.css.items():
                style[name] = css_value
        self.redraw()

    def append(self, item: Any, key: Optional[str] = None) -> None:
        """Add a child (a control or a string). If no key is given it is an empty string."""
        self._call("append", to_foreign(item), key=key or "")

    def redraw(self) -> None:
        self._call("redraw")

    def slot_for(self, kind: EventKind) -> str:
        """The toolkit event slot that reports `kind` for this control."""
        return self.event_slots.get(kind, kind.default_slot)

    def current_value(self) -> Any:
        """The value handed to change handlers. Changeable controls override this."""
        return None

    def fire(self, kind: EventKind, *payload) -> ForeignValue:
        """Run the handler registered for `kind` as if the user had triggered it."""
        return self.bridge.trigger(self, kind, *payload)

    def __eq__(self, other):
        if not isinstance(other, Control):
            return NotImplemented
        return other._foreign is self._foreign

    def __hash__(self):
        return id(self._foreign)

    def __repr__(self):
        return f"{type(self).__name__}({self._foreign!r})"


class Clickable:
    """Mixin for controls that report clicks."""

    def on_click(self, handler: ClickHandler) -> EventRegistration:
        """Call `handler(control)` when the control is clicked."""
        return self.bridge.attach(self, EventKind.CLICK, handler)


class Changeable:
    """
    Mixin for controls whose value the user can change.

    Handlers receive `(control, new_value)`, where `new_value` is read from
    the control when the event arrives.
    """
    change_event = EventKind.CHANGE

    def on_change(self, handler: ChangeHandler) -> EventRegistration:
        return self.bridge.attach(self, self.change_event, handler)

    def current_value(self) -> Any:
        raise NotImplementedError(f"{type(self).__name__} must implement current_value()")
