# ocgui/delegate.py

"""
Turning an application delegate into a remi App class.

remi serves a *class*: it instantiates it for every request and calls its
`main()` once per session to get the root widget. An ocgui application is
instead a plain object (an AppDelegate) that holds its widgets as fields and
builds its layout in `main(app)`.

DelegateSynthesizer bridges the two. It collects the delegate's widget fields,
adds two synthesized members (`init`, forwarding to `remi.App.__init__` with
the static resource path, and `main`, calling the delegate), and registers the
result as a subclass of `remi.App` named after the delegate's class.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, Iterator, List, Optional, Tuple

from .bridge import CallableAdapter
from .errors import AlreadyBuiltError, RegistrationError, ReservedNameError, SynthesisError
from .toolkit import ForeignValue, Toolkit, get_toolkit, is_foreign_convertible

logger = logging.getLogger(__name__)

INIT = "init"
MAIN = "main"
RESERVED_NAMES = (INIT, MAIN)

# Descriptor names that take a different name on the generated class.
_CLASS_MEMBER_NAMES = {INIT: "__init__"}

WELCOME_TEXT = '''\
class MyApp(AppDelegate):
    def __init__(self):
        super().__init__()
        # Declare your widgets as fields.
        self.name = TextField(hint="Type here")
        self.ok = Button("OK")

    def main(self, app):
        # Set up the GUI and return the root control.
        self.ok.on_click(lambda button: app.close())
        return VBox([self.name, self.ok])


MyApp().start()
'''


class AppDelegate:
    """
    Base class for applications.

    Declare widgets as instance fields (or with `register()`), override
    `main(app)` to build the layout and return the root control, then call
    `start()`. Fields that are not widgets are left alone.

    For example::

        class Greeter(AppDelegate):
            def __init__(self):
                super().__init__()
                self.name = TextField(hint="Your name")
                self.greeting = Label("")

            def main(self, app):
                self.name.on_change(lambda field, text: setattr(self.greeting, "text", f"Hello {text}"))
                return VBox([self.name, self.greeting])

        Greeter().start()
    """

    def __init__(self):
        self._ocgui_registry: Dict[str, Any] = {}

    @property
    def _registry(self) -> Dict[str, Any]:
        # Subclasses that forget super().__init__() still get a registry.
        return self.__dict__.setdefault("_ocgui_registry", {})

    def register(self, name: str, widget: Any) -> Any:
        """
        Declare a widget field explicitly and return it.

        :raises RegistrationError: for a non-identifier name, a value that is
            not a widget, or a name already bound to another widget.
        :raises ReservedNameError: for "init" or "main".
        """
        if not isinstance(name, str) or not name.isidentifier():
            raise RegistrationError(f"{name!r} is not a valid field name")
        if name in RESERVED_NAMES:
            raise ReservedNameError(name)
        if not is_foreign_convertible(widget):
            raise RegistrationError(f"Field {name!r} is a {type(widget).__name__}, not a widget")
        existing = self._registry.get(name)
        if existing is not None and existing is not widget:
            raise RegistrationError(f"Field {name!r} is already registered")
        self._registry[name] = widget
        return widget

    def registered_fields(self) -> Dict[str, Any]:
        return dict(self._registry)

    def main(self, app) -> Any:
        """
        Build the user interface and return the root control.

        Override this. The default shows a short getting-started page with a
        Quit button.
        """
        from .widgets import Button, Label, TextArea, VBox

        label = Label("Override the main method to create a GUI. Copy the example code below to get started.")
        example = TextArea()
        example.text = WELCOME_TEXT
        quit_button = Button("Quit")
        quit_button.on_click(lambda button: app.close())
        return VBox([label, example, quit_button])

    def start(self, config=None, toolkit: Optional[Toolkit] = None) -> None:
        """Build the app class, start the server and serve until closed."""
        from .runtime import AppRuntime

        AppRuntime(self, config=config, toolkit=toolkit).start()


@dataclass
class DelegateDescriptor:
    """
    The members of the class synthesized for one delegate.

    `entries` maps member names to toolkit values: every widget field of the
    delegate, plus the synthesized `init` and `main` callables.
    """
    class_name: str
    entries: Dict[str, ForeignValue] = field(default_factory=dict)

    @property
    def field_names(self) -> List[str]:
        return [name for name in self.entries if name not in RESERVED_NAMES]

    def keys(self) -> List[str]:
        return list(self.entries)

    def items(self) -> List[Tuple[str, ForeignValue]]:
        return list(self.entries.items())

    def __getitem__(self, name: str) -> ForeignValue:
        return self.entries[name]

    def __contains__(self, name):
        return name in self.entries

    def __iter__(self) -> Iterator[str]:
        return iter(self.entries)

    def __len__(self):
        return len(self.entries)

    def validate(self) -> None:
        """
        :raises SynthesisError: if the descriptor cannot become a class.
        """
        if not self.class_name or not self.class_name.isidentifier():
            raise SynthesisError(f"Invalid app class name: {self.class_name!r}")
        for name in RESERVED_NAMES:
            if not callable(self.entries.get(name)):
                raise SynthesisError(f"The descriptor for {self.class_name} has no {name!r} member")
        for name, value in self.entries.items():
            if value is None:
                raise SynthesisError(f"Member {name!r} of {self.class_name} has no value")

    def class_members(self) -> Dict[str, ForeignValue]:
        return {_CLASS_MEMBER_NAMES.get(name, name): value for name, value in self.entries.items()}


class SynthesizerState(Enum):
    UNBUILT = "unbuilt"
    BUILT = "built"


class DelegateSynthesizer:
    """
    Builds the descriptor for a delegate and registers it with the toolkit.

    A synthesizer builds once. A second `build()` raises AlreadyBuiltError.

    :param delegate: The application delegate.
    :param res_path: Directory served to the browser under the "res" prefix.
    :param make_handle: Turns the per-session remi App instance into the
        object passed to `delegate.main()`.
    :param toolkit: The toolkit providing the App base class.
    """

    def __init__(self, delegate: AppDelegate, res_path: str,
                 make_handle: Optional[Callable[[ForeignValue], Any]] = None,
                 toolkit: Optional[Toolkit] = None):
        self.delegate = delegate
        self.res_path = res_path
        self.make_handle = make_handle or (lambda app: app)
        self.toolkit = toolkit or get_toolkit()
        self.state = SynthesizerState.UNBUILT
        self.descriptor: Optional[DelegateDescriptor] = None
        self.app_class: Optional[type] = None

    def collect_fields(self) -> Dict[str, ForeignValue]:
        """
        The delegate's widget fields, by name.

        Candidates are the explicitly registered fields followed by the
        instance attributes. Values that cannot present a toolkit object are
        skipped, as is the delegate's own registry.
        """
        registry = self.delegate._registry
        candidates = list(registry.items()) + list(vars(self.delegate).items())
        app_base = self.toolkit.app_base
        fields: Dict[str, ForeignValue] = {}
        for name, value in candidates:
            if value is registry or value is self:
                continue
            if not is_foreign_convertible(value):
                logger.debug("Skipping field %r of %s: not a widget", name, type(self.delegate).__name__)
                continue
            if name in RESERVED_NAMES:
                raise ReservedNameError(name)
            if name.startswith("__") or hasattr(app_base, name):
                raise ReservedNameError(name)
            foreign = value.foreign_value
            if name in fields and fields[name] is not foreign:
                raise RegistrationError(f"Field {name!r} is bound to two different widgets")
            fields[name] = foreign
        return fields

    def build(self) -> DelegateDescriptor:
        """
        Create the descriptor: all widget fields plus `init` and `main`.

        :raises AlreadyBuiltError: on a second call.
        """
        if self.state is SynthesizerState.BUILT:
            raise AlreadyBuiltError(f"{type(self.delegate).__name__} has already been built")
        entries = self.collect_fields()
        class_name = type(self.delegate).__name__
        entries[INIT] = CallableAdapter(self._init, swallow_errors=False, name=f"{class_name}.__init__")
        entries[MAIN] = CallableAdapter(self._main, swallow_errors=False, name=f"{class_name}.main")
        self.descriptor = DelegateDescriptor(class_name=class_name, entries=entries)
        self.state = SynthesizerState.BUILT
        logger.debug("Built %s with fields %s", class_name, self.descriptor.field_names)
        return self.descriptor

    def register_class(self, descriptor: Optional[DelegateDescriptor] = None) -> type:
        """Create the App subclass described by `descriptor` (default: the built one)."""
        descriptor = descriptor or self.descriptor
        if descriptor is None:
            raise SynthesisError("build() must be called before register_class()")
        descriptor.validate()
        members = descriptor.class_members()
        members["__module__"] = type(self.delegate).__module__
        self.app_class = type(descriptor.class_name, (self.toolkit.app_base,), members)
        return self.app_class

    def synthesize(self) -> type:
        """build() and register_class() in one step."""
        return self.register_class(self.build())

    # --- synthesized members ---

    def _init(self, app, *args, **kwargs) -> None:
        kwargs.setdefault("static_file_path", {"res": self.res_path})
        self.toolkit.app_base.__init__(app, *args, **kwargs)

    def _main(self, app, *userdata) -> Any:
        root = self.delegate.main(self.make_handle(app))
        if not is_foreign_convertible(root):
            raise SynthesisError(f"{type(self.delegate).__name__}.main() must return a widget, not {type(root).__name__}")
        return root
