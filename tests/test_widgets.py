"""
Tests for the widget facade, run against the fake toolkit.
"""

import unittest
from datetime import date

from ocgui.bridge import EventKind
from ocgui.errors import (
    DateFormatError,
    DialogStateError,
    DuplicateKeyError,
    ForeignStateError,
    ListIndexError,
    NotSelectableError,
    SelectionError,
)
from ocgui.styles import BorderStyle, Color, ContentJustification, Style
from ocgui.units import Size, SizeUnit
from ocgui.widgets import (
    Button,
    CheckBox,
    ColorPicker,
    DatePicker,
    Dialog,
    DropDown,
    HBox,
    ImageView,
    Label,
    ListView,
    TextArea,
    TextField,
    VBox,
)

from tests.fakes import ToolkitTestCase, make_toolkit


class TestControl(ToolkitTestCase):

    def all_widgets(self):
        return [
            Button("b"), Label("l"), ImageView("image.png"), TextField(), TextArea(),
            CheckBox(), ColorPicker(), DatePicker(), DropDown(["a"]), ListView(),
            Dialog("t", "m"), HBox([]), VBox([]),
        ]

    def test_enabled_round_trip(self):
        for widget in self.all_widgets():
            with self.subTest(widget=type(widget).__name__):
                self.assertTrue(widget.enabled)
                for value in (False, True, False):
                    widget.enabled = value
                    self.assertEqual(widget.enabled, value)

    def test_visible(self):
        label = Label("x")
        self.assertTrue(label.visible)
        label.visible = False
        self.assertFalse(label.visible)
        self.assertEqual(label.foreign_value.style["display"], "none")
        label.visible = True
        self.assertTrue(label.visible)
        self.assertNotIn("display", label.foreign_value.style)

    def test_size_round_trip(self):
        button = Button("b")
        self.assertIsNone(button.size)
        for size in (Size.of(10, 20), Size.of("50%", 30), Size.of("100%", "100%")):
            button.size = size
            self.assertEqual(button.size, size)

    def test_size_none_is_ignored(self):
        button = Button("b")
        button.size = Size.of(1, 2)
        button.size = None
        self.assertEqual(button.size, Size.of(1, 2))

    def test_width_and_height(self):
        label = Label("x")
        label.width = 40
        self.assertEqual(label.width, SizeUnit.pixels(40))
        self.assertIsNone(label.size)
        label.height = "25%"
        self.assertEqual(label.size, Size(SizeUnit.pixels(40), SizeUnit.percent(25)))

    def test_unreadable_size(self):
        label = Label("x")
        label.foreign_value.style.update({"width": "10em", "height": "2px"})
        with self.assertRaises(ForeignStateError):
            label.size

    def test_default_sizes(self):
        self.assertEqual(TextArea().size, Size(SizeUnit.percent(100), SizeUnit.pixels(200)))
        self.assertEqual(ListView().size, Size(SizeUnit.percent(100), SizeUnit.percent(100)))

    def test_identity(self):
        button = Button("b")
        self.assertEqual(button, Button.wrap(button.foreign_value))
        self.assertNotEqual(button, Button("b"))
        with self.assertRaises(ValueError):
            Label.wrap(None)

    def test_set_style(self):
        label = Label("x")
        label.set_style(Style.font_size(14), Style.background_color(Color.LIGHT_BLUE),
                        Style.border_style(BorderStyle.DASHED))
        style = label.foreign_value.style
        self.assertEqual(style["font-size"], "14px")
        self.assertEqual(style["background-color"], "lightblue")
        self.assertEqual(style["border-style"], "dashed")

    def test_explicit_toolkit(self):
        other = make_toolkit()
        label = Label("x", toolkit=other)
        self.assertIs(label.toolkit, other)


class TestTextWidgets(ToolkitTestCase):

    def test_button_and_label_text(self):
        button = Button("Ok")
        label = Label("Hello")
        self.assertEqual(button.text, "Ok")
        button.text = "Cancel"
        label.text = "World"
        self.assertEqual((button.text, label.text), ("Cancel", "World"))

    def test_text_field(self):
        field = TextField(hint="Type here")
        self.assertEqual(field.text, "")
        self.assertTrue(field.foreign_value.single_line)
        self.assertEqual(field.foreign_value.attributes["placeholder"], "Type here")
        field.text = "abc"
        self.assertEqual(field.text, "abc")

    def test_text_area_is_multi_line(self):
        area = TextArea()
        self.assertFalse(area.foreign_value.single_line)
        seen = []
        area.on_change(lambda widget, text: seen.append(text))
        area.text = "line 1\nline 2"
        area.fire(EventKind.CHANGE)
        self.assertEqual(seen, ["line 1\nline 2"])

    def test_image_view(self):
        image = ImageView("image.png")
        self.assertEqual(image.filename, "image.png")
        image.filename = "other/picture.jpg"
        self.assertEqual(image.filename, "other/picture.jpg")


class TestValueWidgets(ToolkitTestCase):

    def test_check_box(self):
        box = CheckBox(checked=True)
        self.assertTrue(box.checked)
        box.checked = False
        self.assertFalse(box.checked)

    def test_color_picker(self):
        self.assertEqual(ColorPicker().color, ColorPicker.DEFAULT_COLOR)
        picker = ColorPicker("#112233")
        picker.color = "#abcdef"
        self.assertEqual(picker.color, "#abcdef")

    def test_date_round_trip(self):
        picker = DatePicker(date(2015, 4, 13))
        self.assertEqual(picker.date, date(2015, 4, 13))
        for day in (date(2000, 1, 1), date(2031, 12, 31)):
            picker.date = day
            self.assertEqual(picker.date, day)
            self.assertEqual(picker.date_string, day.isoformat())

    def test_date_defaults_to_today(self):
        self.assertEqual(DatePicker().date, date.today())

    def test_date_string_setter_validates(self):
        picker = DatePicker(date(2015, 4, 13))
        picker.date_string = "2020-02-29"
        self.assertEqual(picker.date, date(2020, 2, 29))
        with self.assertRaises(DateFormatError):
            picker.date_string = "29.02.2020"
        self.assertEqual(picker.date_string, "2020-02-29")

    def test_malformed_date_in_toolkit(self):
        picker = DatePicker()
        picker.foreign_value.value = "not a date"
        with self.assertRaises(ForeignStateError):
            picker.date

    def test_malformed_date_during_event_is_logged(self):
        picker = DatePicker()
        picker.on_change(lambda widget, day: None)
        picker.foreign_value.value = "2015-13-45"
        with self.assertLogs("ocgui.bridge", level="ERROR"):
            picker.foreign_value.onchange.fire(picker.foreign_value, "2015-13-45")


class TestDropDown(ToolkitTestCase):
    DAYS = ["Monday", "Tuesday", "Wednesday"]

    def test_first_item_is_selected(self):
        drop_down = DropDown(self.DAYS)
        self.assertEqual(drop_down.selected_text, "Monday")
        self.assertEqual(drop_down.selected_index, 0)
        self.assertEqual(drop_down.current_value(), "Monday")

    def test_items_are_keyed_in_order(self):
        drop_down = DropDown(self.DAYS)
        self.assertEqual(drop_down.items, self.DAYS)
        self.assertEqual(drop_down.count, 3)
        drop_down.select_index(1)
        self.assertEqual(drop_down.selected_item.key, "2")
        self.assertEqual(drop_down.selected_item.text, "Tuesday")

    def test_select(self):
        drop_down = DropDown(self.DAYS)
        drop_down.select_by_text("Wednesday")
        self.assertEqual(drop_down.selected_index, 2)
        drop_down.select_by_key("1")
        self.assertEqual(drop_down.selected_text, "Monday")

    def test_select_errors(self):
        drop_down = DropDown(self.DAYS)
        with self.assertRaises(ListIndexError):
            drop_down.select_index(3)
        with self.assertRaises(ListIndexError):
            drop_down.select_index(-1)
        with self.assertRaises(SelectionError):
            drop_down.select_by_text("Sunday")
        with self.assertRaises(SelectionError):
            drop_down.select_by_key("9")
        self.assertEqual(drop_down.selected_text, "Monday")

    def test_empty_drop_down(self):
        drop_down = DropDown()
        self.assertIsNone(drop_down.selected_index)
        self.assertIsNone(drop_down.selected_item)
        drop_down.append("only")
        self.assertEqual(drop_down.items, ["only"])
        drop_down.empty()
        self.assertEqual(drop_down.count, 0)
        self.assertIsNone(drop_down.selected_text)

    def test_change_handler(self):
        drop_down = DropDown(self.DAYS)
        seen = []
        drop_down.on_change(lambda widget, text: seen.append(text))
        drop_down.select_index(2)
        drop_down.foreign_value.onchange.fire(drop_down.foreign_value, "Wednesday")
        self.assertEqual(seen, ["Wednesday"])


class TestListView(ToolkitTestCase):

    def make_list(self):
        view = ListView()
        view.extend(["1", "2", "3", "4", "5"])
        return view

    def test_select_index(self):
        view = self.make_list()
        self.assertIsNone(view.selected_index)
        view.select_index(2)
        self.assertEqual(view.selected_text, "3")
        self.assertEqual(view.selected_index, 2)

    def test_remove_keeps_the_selected_item(self):
        view = self.make_list()
        view.select_index(2)
        self.assertEqual(view.remove(0), "1")
        self.assertEqual(view.items, ["2", "3", "4", "5"])
        self.assertEqual(view.text_at(1), "3")
        self.assertEqual(view.selected_text, "3")
        self.assertEqual(view.selected_index, 1)
        self.assertEqual(len(view.foreign_value.children), 4)

    def test_out_of_range(self):
        view = self.make_list()
        for index in (5, -1, 100):
            with self.subTest(index=index):
                with self.assertRaises(ListIndexError) as ctx:
                    view.select_index(index)
                self.assertEqual(ctx.exception.length, 5)
        with self.assertRaises(IndexError):
            view.remove(5)
        self.assertEqual(view.count, 5)

    def test_not_selectable(self):
        view = ListView(selectable=False)
        view.append("a")
        with self.assertRaises(NotSelectableError):
            view.select_index(0)

    def test_selection_handler_uses_the_selection_slot(self):
        view = self.make_list()
        seen = []
        view.on_selection_change(lambda widget, text: seen.append(text))
        view.select_index(3)
        view.foreign_value.onselection.fire(view.foreign_value, "ignored")
        self.assertEqual(seen, ["4"])
        self.assertIsNone(view.foreign_value.onchange.listener)

    def test_index_of(self):
        view = self.make_list()
        self.assertEqual(view.index_of("4"), 3)
        self.assertIsNone(view.index_of("42"))


class TestDialog(ToolkitTestCase):

    def test_fields(self):
        dialog = Dialog("Dialog", "Fill in the form")
        name = TextField()
        born = DatePicker()
        dialog.add_field("name", name)
        dialog.add_field("born", born, label="Date of Birth:")
        self.assertIs(dialog.get_field("name"), name)
        self.assertIs(dialog.get_field("born"), born)
        self.assertIsNone(dialog.get_field("missing"))
        self.assertIs(dialog.foreign_value.fields["born"], born.foreign_value)
        self.assertEqual(dialog.foreign_value.labels["born"], "Date of Birth:")

    def test_duplicate_key(self):
        dialog = Dialog("Dialog", "")
        first = TextField()
        dialog.add_field("name", first)
        with self.assertRaises(DuplicateKeyError) as ctx:
            dialog.add_field("name", TextField())
        self.assertEqual(ctx.exception.key, "name")
        self.assertIsInstance(ctx.exception, KeyError)
        self.assertIs(dialog.get_field("name"), first)
        self.assertIs(dialog.foreign_value.fields["name"], first.foreign_value)

    def test_hide_before_show(self):
        with self.assertRaises(DialogStateError):
            Dialog("Dialog", "").hide()

    def test_confirm_and_cancel(self):
        dialog = Dialog("Dialog", "")
        events = []
        dialog.on_confirm(lambda d: events.append("confirm"))
        dialog.on_cancel(lambda d: events.append("cancel"))
        dialog.foreign_value.confirm_dialog.fire(dialog.foreign_value)
        dialog.foreign_value.cancel_dialog.fire(dialog.foreign_value)
        self.assertEqual(events, ["confirm", "cancel"])

    def test_buttons(self):
        dialog = Dialog("Dialog", "")
        dialog.confirm_button.enabled = False
        self.assertFalse(dialog.confirm_button.enabled)
        self.assertTrue(dialog.cancel_button.enabled)
        self.assertEqual(dialog.cancel_button.text, "Cancel")


class TestLayout(ToolkitTestCase):

    def test_boxes_hold_children_in_order(self):
        label, button = Label("a"), Button("b")
        box = HBox([label, button], justify=ContentJustification.CENTER)
        self.assertEqual(list(box.children.values()), [label.foreign_value, button.foreign_value])
        self.assertEqual(box.foreign_value.style["justify-content"], "center !important")

    def test_nested_boxes(self):
        inner = HBox([Label("x")])
        outer = VBox([inner])
        self.assertIs(list(outer.children.values())[0], inner.foreign_value)
        self.assertEqual(outer.foreign_value.style["justify-content"], ContentJustification.SPACE_AROUND.value)


if __name__ == "__main__":
    unittest.main()
