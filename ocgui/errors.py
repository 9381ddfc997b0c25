# ocgui/errors.py

"""
Exception types raised by OCGUI.

Configuration errors are raised at registration/build time and can be fixed
by the caller. ForeignStateError marks foreign state this package never wrote
(a malformed size or date string); it is not meant to be recovered from.
"""


class OCGUIError(Exception):
    """Base class for every error raised by the framework."""


class ConfigurationError(OCGUIError):
    """A widget, dialog field or delegate member was declared incorrectly."""


class DuplicateKeyError(ConfigurationError, KeyError):
    """A dialog field key was registered twice."""

    def __init__(self, key: str):
        super().__init__(key)
        self.key = key

    def __str__(self):
        return f"A field with the key {self.key!r} is already registered."


class ReservedNameError(ConfigurationError):
    """A delegate field collides with a synthesized member name."""

    def __init__(self, name: str):
        super().__init__(name)
        self.name = name

    def __str__(self):
        return f"{self.name!r} is reserved for the synthesized app class and cannot be used as a field name."


class RegistrationError(ConfigurationError):
    """A delegate registration was given a bad name or a value that is not a widget."""


class ForeignStateError(OCGUIError):
    """The toolkit holds a value this package could not have written."""


class SelectionError(OCGUIError):
    """Base class for selection failures on lists and drop-downs."""


class ListIndexError(SelectionError, IndexError):
    """An item index is outside the list."""

    def __init__(self, index: int, length: int):
        super().__init__(index, length)
        self.index = index
        self.length = length

    def __str__(self):
        return f"Index {self.index} is out of range for a list of {self.length} items."


class NotSelectableError(SelectionError):
    """A selection was requested on a list created with selectable=False."""


class DialogStateError(OCGUIError):
    """A dialog operation was called in the wrong state (e.g. hide before show)."""


class SynthesisError(OCGUIError):
    """The delegate could not be turned into a toolkit app class."""


class AlreadyBuiltError(OCGUIError):
    """The app has already been built and started once."""


class BridgeCallError(OCGUIError):
    """A native lifecycle callback failed while being called from the toolkit."""


class SizeFormatError(ValueError):
    """A size string is not of the form '<integer>px' or '<integer>%'."""


class DateFormatError(ValueError):
    """A date string is not of the form 'yyyy-MM-dd'."""
