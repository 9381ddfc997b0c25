# ocgui/widgets.py
import logging
from datetime import date
from typing import Any, Dict, Iterable, List, Optional, Union

from .base import Changeable, Clickable, Control
from .bridge import ChangeHandler, ClickHandler, EventKind, EventRegistration
from .errors import DateFormatError, DialogStateError, ForeignStateError, NotSelectableError, SelectionError
from .models import DialogFieldRegistry, ListEntry, ListModel
from .styles import ContentJustification
from .toolkit import ForeignValue, Toolkit, to_foreign
from .units import Size, SizeUnit, format_date, parse_date

logger = logging.getLogger(__name__)


class Button(Clickable, Control):
    """A regular button that can be clicked."""

    def __init__(self, text: str, toolkit: Optional[Toolkit] = None):
        foreign, toolkit = self._construct(toolkit, "Button", text)
        super().__init__(foreign, toolkit)

    @property
    def text(self) -> str:
        return str(self._call("get_text"))

    @text.setter
    def text(self, value: str):
        self._call("set_text", value)
        self.redraw()


class Label(Control):
    """A label to present text."""

    def __init__(self, text: str, toolkit: Optional[Toolkit] = None):
        foreign, toolkit = self._construct(toolkit, "Label", text)
        super().__init__(foreign, toolkit)

    @property
    def text(self) -> str:
        return str(self._call("get_text"))

    @text.setter
    def text(self, value: str):
        self._call("set_text", value)
        self.redraw()


class ImageView(Control):
    """
    A view that shows an image.

    The filename is a path relative to the static resource directory, for
    example "image.png" or "subfolder/image.png".
    """

    def __init__(self, filename: str, toolkit: Optional[Toolkit] = None):
        foreign, toolkit = self._construct(toolkit, "Image", filename)
        super().__init__(foreign, toolkit)

    @property
    def filename(self) -> str:
        return str(self._get("attributes")["src"])

    @filename.setter
    def filename(self, value: str):
        self._call("set_image", value)


class TextField(Changeable, Control):
    """
    A single-line field for the user to enter text.

    :param hint: Text shown in light grey until the user starts typing.
    """

    def __init__(self, hint: Optional[str] = None, toolkit: Optional[Toolkit] = None):
        foreign, toolkit = self._construct(toolkit, "TextInput", single_line=True, hint=hint or "")
        super().__init__(foreign, toolkit)

    @property
    def text(self) -> str:
        return str(self._call("get_value"))

    @text.setter
    def text(self, value: str):
        self._call("set_value", value)
        self.redraw()

    def current_value(self) -> str:
        return self.text


class TextArea(TextField):
    """A large, multi-line area to display text and/or let the user enter it."""

    def __init__(self, hint: str = "", toolkit: Optional[Toolkit] = None):
        foreign, toolkit = self._construct(toolkit, "TextInput", single_line=False, hint=hint)
        Control.__init__(self, foreign, toolkit)
        self.size = Size(SizeUnit.percent(100), SizeUnit.pixels(200))


class CheckBox(Changeable, Control):
    """A check box. It is either checked (True) or unchecked (False)."""

    def __init__(self, checked: bool = False, toolkit: Optional[Toolkit] = None):
        foreign, toolkit = self._construct(toolkit, "CheckBox", checked=bool(checked))
        super().__init__(foreign, toolkit)

    @property
    def checked(self) -> bool:
        return bool(self._call("get_value"))

    @checked.setter
    def checked(self, value: bool):
        self._call("set_value", bool(value))
        self.redraw()

    def current_value(self) -> bool:
        return self.checked


class ColorPicker(Changeable, Control):
    """
    A color picker. Clicking it opens the browser's own color picker.

    Colors are exchanged as "#rrggbb" strings.
    """
    DEFAULT_COLOR = "#995500"

    def __init__(self, default_color: Optional[str] = None, toolkit: Optional[Toolkit] = None):
        foreign, toolkit = self._construct(toolkit, "ColorPicker", default_value=default_color or self.DEFAULT_COLOR)
        super().__init__(foreign, toolkit)

    @property
    def color(self) -> str:
        return str(self._call("get_value"))

    @color.setter
    def color(self, value: str):
        self._call("set_value", value)
        self.redraw()

    def current_value(self) -> str:
        return self.color


class DatePicker(Changeable, Control):
    """
    A date picker. Clicking it opens the browser's own date picker.

    :param default_date: The initial date; today when omitted.
    """

    def __init__(self, default_date: Optional[date] = None, toolkit: Optional[Toolkit] = None):
        initial = format_date(default_date or date.today())
        foreign, toolkit = self._construct(toolkit, "Date", default_value=initial)
        super().__init__(foreign, toolkit)

    @property
    def date(self) -> date:
        """
        The selected date.

        :raises ForeignStateError: if the toolkit holds a string that is not
            "yyyy-MM-dd". This package never writes one.
        """
        raw = self._call("get_value")
        try:
            return parse_date(raw)
        except DateFormatError as e:
            raise ForeignStateError(f"Date picker holds an invalid date: {raw!r}") from e

    @date.setter
    def date(self, value: date):
        self._call("set_value", format_date(value))
        self.redraw()

    @property
    def date_string(self) -> str:
        """The selected date as a "yyyy-MM-dd" string."""
        return format_date(self.date)

    @date_string.setter
    def date_string(self, value: str):
        parse_date(value)
        self._call("set_value", value)
        self.redraw()

    def current_value(self) -> date:
        return self.date


# --- Item lists ---

class DropDownItem(Control):
    """An item of a DropDown."""
    _key: Optional[str] = None

    def __init__(self, text: str, key: Optional[str] = None, toolkit: Optional[Toolkit] = None):
        foreign, toolkit = self._construct(toolkit, "DropDownItem", text)
        super().__init__(foreign, toolkit)
        self._key = key or None

    @classmethod
    def wrap_entry(cls, entry: ListEntry, toolkit: Optional[Toolkit] = None) -> "DropDownItem":
        item = cls.wrap(entry.item, toolkit)
        item._key = entry.key or None
        return item

    @property
    def text(self) -> str:
        return str(self._call("get_text"))

    @text.setter
    def text(self, value: str):
        self._call("set_text", value)
        self.redraw()

    @property
    def key(self) -> Optional[str]:
        """The key given when the item was added, or None."""
        return self._key


class ListItem(Control):
    """An item of a ListView."""
    _key: Optional[str] = None

    def __init__(self, text: str, toolkit: Optional[Toolkit] = None):
        foreign, toolkit = self._construct(toolkit, "ListItem", text)
        super().__init__(foreign, toolkit)

    @classmethod
    def wrap_entry(cls, entry: ListEntry, toolkit: Optional[Toolkit] = None) -> "ListItem":
        item = cls.wrap(entry.item, toolkit)
        item._key = entry.key or None
        return item

    @property
    def text(self) -> str:
        return str(self._call("get_text"))

    @property
    def key(self) -> Optional[str]:
        return self._key


class ItemContainer(Changeable):
    """
    Shared behaviour of DropDown and ListView.

    Positions and labels are answered from `self.model`, a ListModel kept in
    step with the toolkit's children. The toolkit itself can only tell which
    item is selected.
    """
    item_class = None

    model: ListModel

    def _check_selectable(self) -> None:
        pass

    def append(self, item: Union[str, Control], key: Optional[str] = None) -> None:
        """Add an item at the end. A string becomes a new item with that label."""
        if not isinstance(item, self.item_class):
            item = self.item_class(str(item), toolkit=self.toolkit)
        returned_key = self._call("append", item.foreign_value, key=key or "")
        used_key = returned_key if isinstance(returned_key, str) else (key or "")
        item._key = used_key or None
        self.model.append(item.text, used_key, item.foreign_value)

    def extend(self, items: Iterable[str]) -> None:
        for item in items:
            self.append(item)

    def empty(self) -> None:
        """Remove every item."""
        self._call("empty")
        self.model.clear()

    @property
    def items(self) -> List[str]:
        return self.model.texts

    def text_at(self, index: int) -> str:
        return self.model.text_at(index)

    def index_of(self, text: str) -> Optional[int]:
        return self.model.index_of(text)

    @property
    def count(self) -> int:
        return len(self.model)

    # --- selection ---

    def select_index(self, index: int) -> None:
        """
        :raises ListIndexError: if `index` is out of range.
        """
        self._check_selectable()
        entry = self.model.entry_at(index)
        if entry.key:
            self._call("select_by_key", entry.key)
        else:
            self._call("select_by_value", entry.text)

    def select_by_key(self, key: str) -> None:
        self._check_selectable()
        if self.model.index_of_key(key) is None:
            raise SelectionError(f"No item with the key {key!r}")
        self._call("select_by_key", key)

    def select_by_text(self, text: str) -> None:
        self._check_selectable()
        if self.model.index_of(text) is None:
            raise SelectionError(f"No item with the text {text!r}")
        self._call("select_by_value", text)

    def select_item(self, item: Control) -> None:
        self.select_by_text(item.text)

    @property
    def selected_index(self) -> Optional[int]:
        return self.model.index_of_item(self._call("get_item"))

    @property
    def selected_item(self) -> Optional[Control]:
        """The selected item, or None when nothing is selected."""
        index = self.selected_index
        if index is None:
            return None
        return self.item_class.wrap_entry(self.model.entry_at(index), self.toolkit)

    @property
    def selected_text(self) -> Optional[str]:
        index = self.selected_index
        return None if index is None else self.model.text_at(index)

    def on_selection_change(self, handler: ChangeHandler) -> EventRegistration:
        return self.on_change(handler)

    def current_value(self) -> Optional[str]:
        return self.selected_text


class DropDown(ItemContainer, Control):
    """
    A drop-down menu of text options.

    Items are keyed "1", "2", ... in the order given, and the first one is
    selected after construction.
    """
    item_class = DropDownItem

    def __init__(self, items: Iterable[str] = (), toolkit: Optional[Toolkit] = None):
        foreign, toolkit = self._construct(toolkit, "DropDown")
        super().__init__(foreign, toolkit)
        self.model = ListModel()
        items = list(items)
        for offset, item in enumerate(items):
            self.append(item, key=str(offset + 1))
        if items:
            self.select_by_text(items[0])


class ListView(ItemContainer, Control):
    """
    A list of items, each presented on its own row.

    :param selectable: When False, the selection methods raise NotSelectableError.
    """
    item_class = ListItem
    change_event = EventKind.SELECTION

    def __init__(self, selectable: bool = True, toolkit: Optional[Toolkit] = None):
        foreign, toolkit = self._construct(toolkit, "ListView", selectable=bool(selectable))
        super().__init__(foreign, toolkit)
        self.model = ListModel()
        self._selectable = bool(selectable)
        self.size = Size(SizeUnit.percent(100), SizeUnit.percent(100))

    @property
    def selectable(self) -> bool:
        return self._selectable

    def _check_selectable(self) -> None:
        if not self._selectable:
            raise NotSelectableError("This list view was created with selectable=False")

    def remove(self, index: int) -> str:
        """
        Remove the item at `index` and return its text.

        :raises ListIndexError: if `index` is out of range.
        """
        entry = self.model.entry_at(index)
        self._call("remove_child", entry.item)
        self.model.remove(index)
        return entry.text


# --- Dialog ---

class Dialog(Control):
    """
    A dialog window with Ok and Cancel buttons.

    Fields are added under unique keys and read back with get_field().
    """

    def __init__(self, title: str, message: str, toolkit: Optional[Toolkit] = None):
        foreign, toolkit = self._construct(toolkit, "GenericDialog", title=title, message=message)
        super().__init__(foreign, toolkit)
        self.fields = DialogFieldRegistry()
        self._shown = False

    def add_field(self, key: str, field: Control, label: Optional[str] = None) -> None:
        """
        Add a control under `key`, optionally with a description label.

        :raises DuplicateKeyError: if `key` is already used in this dialog.
        """
        self.fields.add(key, field)
        if label is None:
            self._call("add_field", key, field.foreign_value)
        else:
            self._call("add_field_with_label", key, label, field.foreign_value)

    def get_field(self, key: str) -> Optional[Control]:
        """The control added under `key`, or None."""
        return self.fields.get(key)

    @property
    def confirm_button(self) -> Button:
        return Button.wrap(self._get("conf"), self.toolkit)

    @property
    def cancel_button(self) -> Button:
        return Button.wrap(self._get("cancel"), self.toolkit)

    def show(self, app: Any) -> None:
        """
        Show the dialog in place of the app's root widget.

        `app` is the AppHandle passed to `AppDelegate.main()`. Call this from
        an event handler or from main().
        """
        self._call("show", to_foreign(app))
        self._shown = True

    def hide(self) -> None:
        """
        :raises DialogStateError: if the dialog has never been shown.
        """
        if not self._shown:
            raise DialogStateError("The dialog must be shown before it can be hidden")
        self._call("hide")

    @property
    def shown(self) -> bool:
        return self._shown

    def on_confirm(self, handler: ClickHandler) -> EventRegistration:
        return self.bridge.attach(self, EventKind.CONFIRM, handler)

    def on_cancel(self, handler: ClickHandler) -> EventRegistration:
        return self.bridge.attach(self, EventKind.CANCEL, handler)


# --- Layout ---

class _Box(Control):
    class_name = ""

    def __init__(self, controls: Iterable[Control] = (),
                 justify: ContentJustification = ContentJustification.SPACE_AROUND,
                 toolkit: Optional[Toolkit] = None):
        children = [to_foreign(control) for control in controls]
        foreign, toolkit = self._construct(
            toolkit, self.class_name,
            children=children, style={"justify-content": justify.value},
        )
        super().__init__(foreign, toolkit)

    @property
    def children(self) -> Dict[str, ForeignValue]:
        return dict(self._get("children"))


class HBox(_Box):
    """Places controls next to each other from left to right."""
    class_name = "HBox"


class VBox(_Box):
    """Places controls below each other from top to bottom."""
    class_name = "VBox"
