# lib/main.py
from ocgui import (
    AppDelegate,
    Button,
    CheckBox,
    ColorPicker,
    DatePicker,
    Dialog,
    DropDown,
    HBox,
    Label,
    ListView,
    TextArea,
    TextField,
    VBox,
)


class DemoApp(AppDelegate):
    def __init__(self):
        super().__init__()
        # 1. Label and text field.
        self.label1 = Label("Label:")
        self.text_field1 = TextField(hint="Type here.")
        self.button1 = Button("Copy text to label")

        # 2. Text area.
        self.label2 = Label("Label 2:")
        self.text_area2 = TextArea(hint="Type here.")

        # 3. Check box and drop-down.
        self.label3 = Label("Label 3:")
        self.check_box3 = CheckBox(checked=True)
        self.drop_down3 = DropDown(["1", "2", "3", "4", "5"])

        # 4. Pickers.
        self.color_label4 = Label("Color label 4:")
        self.color_picker4 = ColorPicker()
        self.date_label4 = Label("Date label 4:")
        self.date_picker4 = DatePicker()

        # 5. Dialog.
        self.label5 = Label("Label 5:")
        self.button5 = Button("Show dialog")
        self.dialog5 = Dialog("Dialog", "Click Ok or Cancel.")
        self.text_field5 = TextField()
        self.date_picker5 = DatePicker()

        # 6. List view.
        self.label6 = Label("Label 6:")
        self.list_view6 = ListView()

    def on_button1_click(self, button):
        self.label1.text = self.text_field1.text

    def main(self, app):
        self.button1.on_click(self.on_button1_click)
        self.text_area2.on_change(lambda area, text: setattr(self.label2, "text", text))

        self.check_box3.on_change(lambda box, checked: setattr(self.drop_down3, "enabled", checked))
        self.drop_down3.on_change(lambda drop_down, text: setattr(self.label3, "text", text or "No value"))

        self.color_picker4.on_change(lambda picker, color: setattr(self.color_label4, "text", color))
        self.date_picker4.on_change(lambda picker, day: setattr(self.date_label4, "text", picker.date_string))

        self.button5.on_click(lambda button: self.dialog5.show(app))
        self.dialog5.add_field("name", self.text_field5, label="Name:")
        self.dialog5.add_field("date_of_birth", self.date_picker5, label="Date of Birth:")
        self.dialog5.on_cancel(lambda dialog: setattr(self.label5, "text", "Cancelled"))
        self.dialog5.on_confirm(lambda dialog: setattr(
            self.label5, "text", f"{self.text_field5.text} {self.date_picker5.date_string}"))

        self.list_view6.extend(str(i) for i in range(1, 6))
        self.list_view6.on_change(lambda view, text: setattr(self.label6, "text", text or "No value"))

        quit_button = Button("Quit")
        quit_button.on_click(lambda button: app.close())

        column = VBox([
            HBox([self.label1, self.text_field1, self.button1]),
            VBox([self.label2, self.text_area2]),
            HBox([self.label3, self.check_box3, self.drop_down3]),
            HBox([self.color_label4, self.color_picker4, self.date_label4, self.date_picker4]),
            HBox([self.label5, self.button5]),
            quit_button,
        ])
        return HBox([column, VBox([self.label6, self.list_view6])])


if __name__ == "__main__":
    DemoApp().start()
