# ocgui/units.py
import re
from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Union

from .errors import DateFormatError, SizeFormatError

DATE_FORMAT = "%Y-%m-%d"

_SIZE_PATTERN = re.compile(r"^([0-9]+)(px|%)$")
_DATE_PATTERN = re.compile(r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$")


class Unit(Enum):
    """The unit a size is expressed in."""
    PIXELS = "px"
    PERCENT = "%"


@dataclass(frozen=True)
class SizeUnit:
    """
    One dimension of a widget size, either in pixels or as a percentage.

    :param value: The number of pixels or the percentage.
    :param unit: Unit.PIXELS or Unit.PERCENT.
    """
    value: int
    unit: Unit = Unit.PIXELS

    @classmethod
    def pixels(cls, value: int) -> "SizeUnit":
        return cls(int(value), Unit.PIXELS)

    @classmethod
    def percent(cls, value: int) -> "SizeUnit":
        return cls(int(value), Unit.PERCENT)

    @classmethod
    def parse(cls, string: str) -> "SizeUnit":
        """
        Create a size unit from a string such as "100px" or "100%".

        :raises SizeFormatError: if the string has any other shape.
        """
        match = _SIZE_PATTERN.match(string.strip()) if isinstance(string, str) else None
        if match is None:
            raise SizeFormatError(f"Invalid size string: {string!r}")
        return cls(int(match.group(1)), Unit(match.group(2)))

    @property
    def is_pixels(self) -> bool:
        return self.unit is Unit.PIXELS

    @property
    def is_percent(self) -> bool:
        return self.unit is Unit.PERCENT

    def __str__(self):
        return f"{self.value}{self.unit.value}"


@dataclass(frozen=True)
class Size:
    """The width and height of a widget."""
    width: SizeUnit
    height: SizeUnit

    @classmethod
    def of(cls, width: Union[SizeUnit, str, int], height: Union[SizeUnit, str, int]) -> "Size":
        """Build a size from units, size strings or plain pixel counts."""
        return cls(coerce_size_unit(width), coerce_size_unit(height))

    def __str__(self):
        return f"{self.width} x {self.height}"


def coerce_size_unit(value: Union[SizeUnit, str, int]) -> SizeUnit:
    if isinstance(value, SizeUnit):
        return value
    if isinstance(value, bool):
        raise SizeFormatError(f"Invalid size value: {value!r}")
    if isinstance(value, int):
        return SizeUnit.pixels(value)
    return SizeUnit.parse(value)


def parse_date(string: str) -> date:
    """
    Parse a "yyyy-MM-dd" string.

    :raises DateFormatError: if the string does not match the format exactly.
    """
    if not isinstance(string, str) or _DATE_PATTERN.match(string) is None:
        raise DateFormatError(f"Invalid date string: {string!r}")
    try:
        return datetime.strptime(string, DATE_FORMAT).date()
    except (TypeError, ValueError) as e:
        raise DateFormatError(f"Invalid date string: {string!r}") from e


def format_date(value: date) -> str:
    """Format a date (or datetime, at day granularity) as "yyyy-MM-dd"."""
    if isinstance(value, datetime):
        value = value.date()
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"
