# ocgui/models.py
from dataclasses import dataclass
from typing import TYPE_CHECKING, Dict, Iterator, List, Optional

from .errors import DuplicateKeyError, ListIndexError
from .toolkit import ForeignValue

if TYPE_CHECKING:
    from .base import Control


@dataclass(frozen=True)
class ListEntry:
    """One row of a list or drop-down: its label, key and toolkit item."""
    text: str
    key: str
    item: ForeignValue = None


class ListModel:
    """
    A local mirror of the items in a list view or drop-down.

    The toolkit can only report the *selected* item, so positions and labels
    are looked up here. The owning widget keeps the mirror in step with every
    append, removal and clear it performs on the toolkit object.
    """

    def __init__(self):
        self._entries: List[ListEntry] = []

    def append(self, text: str, key: str = "", item: ForeignValue = None) -> ListEntry:
        entry = ListEntry(text=text, key=key, item=item)
        self._entries.append(entry)
        return entry

    def remove(self, index: int) -> ListEntry:
        self.check_index(index)
        return self._entries.pop(index)

    def clear(self) -> None:
        self._entries.clear()

    def check_index(self, index: int) -> None:
        if not isinstance(index, int) or isinstance(index, bool) or not 0 <= index < len(self._entries):
            raise ListIndexError(index, len(self._entries))

    def entry_at(self, index: int) -> ListEntry:
        self.check_index(index)
        return self._entries[index]

    def text_at(self, index: int) -> str:
        return self.entry_at(index).text

    def index_of(self, text: str) -> Optional[int]:
        """The position of the first item with this label, or None."""
        for index, entry in enumerate(self._entries):
            if entry.text == text:
                return index
        return None

    def index_of_key(self, key: str) -> Optional[int]:
        for index, entry in enumerate(self._entries):
            if entry.key == key:
                return index
        return None

    def index_of_item(self, item: ForeignValue) -> Optional[int]:
        """The position of a toolkit item object, compared by identity."""
        if item is None:
            return None
        for index, entry in enumerate(self._entries):
            if entry.item is item:
                return index
        return None

    @property
    def texts(self) -> List[str]:
        return [entry.text for entry in self._entries]

    def __len__(self):
        return len(self._entries)

    def __iter__(self) -> Iterator[ListEntry]:
        return iter(list(self._entries))

    def __repr__(self):
        return f"ListModel({self.texts!r})"


class DialogFieldRegistry:
    """The fields added to one dialog, by their unique key."""

    def __init__(self):
        self._fields: Dict[str, "Control"] = {}

    def add(self, key: str, field: "Control") -> None:
        """
        :raises DuplicateKeyError: if `key` is already registered.
        """
        if key in self._fields:
            raise DuplicateKeyError(key)
        self._fields[key] = field

    def get(self, key: str) -> Optional["Control"]:
        return self._fields.get(key)

    def keys(self) -> List[str]:
        return list(self._fields)

    def items(self):
        return list(self._fields.items())

    def __contains__(self, key):
        return key in self._fields

    def __len__(self):
        return len(self._fields)

    def __repr__(self):
        return f"DialogFieldRegistry({self.keys()!r})"
