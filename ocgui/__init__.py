# ocgui/__init__.py

"""
OCGUI

A typed Python facade over the remi GUI toolkit. Declare widgets as fields of
an AppDelegate, build the layout in main(), register typed event handlers,
and start() the app; remi renders it in the browser.
"""

# --- Application ---
from .delegate import AppDelegate, DelegateDescriptor, DelegateSynthesizer
from .runtime import AppHandle, AppRuntime
from .config import Config, get_config

# --- Bridge ---
from .toolkit import Toolkit, ForeignConvertible, get_toolkit, use, to_foreign, is_foreign_convertible
from .bridge import CallableAdapter, EventBridge, EventKind, Event, EventRegistration, get_bridge

# --- Base widget, units and styles ---
from .base import Control, Clickable, Changeable
from .units import Size, SizeUnit, Unit, parse_date, format_date
from .styles import (
    ContentJustification,
    Color,
    HexColor,
    FontFamily,
    FontWeight,
    BorderStyle,
    Style,
)

# --- Widgets ---
from .widgets import (
    Button,
    Label,
    ImageView,
    TextField,
    TextArea,
    CheckBox,
    ColorPicker,
    DatePicker,
    DropDownItem,
    DropDown,
    ListItem,
    ListView,
    Dialog,
    HBox,
    VBox,
)

# --- Errors ---
from .errors import (
    OCGUIError,
    ConfigurationError,
    DuplicateKeyError,
    ReservedNameError,
    RegistrationError,
    ForeignStateError,
    SelectionError,
    ListIndexError,
    NotSelectableError,
    DialogStateError,
    SynthesisError,
    AlreadyBuiltError,
    BridgeCallError,
    SizeFormatError,
    DateFormatError,
)

__all__ = [
    # Application
    'AppDelegate', 'DelegateDescriptor', 'DelegateSynthesizer',
    'AppHandle', 'AppRuntime', 'Config', 'get_config',
    # Bridge
    'Toolkit', 'ForeignConvertible', 'get_toolkit', 'use', 'to_foreign',
    'is_foreign_convertible', 'CallableAdapter', 'EventBridge', 'EventKind',
    'Event', 'EventRegistration', 'get_bridge',
    # Base, units, styles
    'Control', 'Clickable', 'Changeable',
    'Size', 'SizeUnit', 'Unit', 'parse_date', 'format_date',
    'ContentJustification', 'Color', 'HexColor', 'FontFamily', 'FontWeight',
    'BorderStyle', 'Style',
    # Widgets
    'Button', 'Label', 'ImageView', 'TextField', 'TextArea', 'CheckBox',
    'ColorPicker', 'DatePicker', 'DropDownItem', 'DropDown', 'ListItem',
    'ListView', 'Dialog', 'HBox', 'VBox',
    # Errors
    'OCGUIError', 'ConfigurationError', 'DuplicateKeyError', 'ReservedNameError',
    'RegistrationError', 'ForeignStateError', 'SelectionError', 'ListIndexError',
    'NotSelectableError', 'DialogStateError', 'SynthesisError', 'AlreadyBuiltError',
    'BridgeCallError', 'SizeFormatError', 'DateFormatError',
]

__version__ = "0.1.0"
