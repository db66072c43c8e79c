"""Audio context (ALC) enumerations and helpers for its list formats."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from enum import IntEnum

ALC_FALSE = 0
ALC_TRUE = 1

_TERMINATOR = 0


class AlcParam(IntEnum):
    """Query parameters accepted by the context string and integer queries."""

    MAJOR_VERSION = 0x1000
    MINOR_VERSION = 0x1001
    ATTRIBUTES_SIZE = 0x1002
    ALL_ATTRIBUTES = 0x1003
    DEFAULT_DEVICE_SPECIFIER = 0x1004
    DEVICE_SPECIFIER = 0x1005
    EXTENSIONS = 0x1006
    CAPTURE_DEVICE_SPECIFIER = 0x310
    CAPTURE_DEFAULT_DEVICE_SPECIFIER = 0x311
    CAPTURE_SAMPLES = 0x312
    DEFAULT_ALL_DEVICES_SPECIFIER = 0x1012
    ALL_DEVICES_SPECIFIER = 0x1013


class AlcError(IntEnum):
    """Error codes reported by a device."""

    NO_ERROR = 0
    INVALID_DEVICE = 0xA001
    INVALID_CONTEXT = 0xA002
    INVALID_ENUM = 0xA003
    INVALID_VALUE = 0xA004
    OUT_OF_MEMORY = 0xA005


class ContextAttribute(IntEnum):
    """Attributes that may appear in a context creation list."""

    FREQUENCY = 0x1007
    REFRESH = 0x1008
    SYNC = 0x1009
    MONO_SOURCES = 0x1010
    STEREO_SOURCES = 0x1011


def error_name(code: int) -> str:
    """Return the symbolic name (``ALC_...``) of an error code."""
    try:
        return f"ALC_{AlcError(code).name}"
    except ValueError:
        raise ValueError(f"unknown ALC error code: {code!r}") from None


def parse_specifier_list(data: bytes | str) -> list[str]:
    """Split a NUL-separated device list; an empty entry ends the list."""
    text = data.decode("utf-8") if isinstance(data, (bytes, bytearray)) else data
    names: list[str] = []
    for name in text.split("\0"):
        if not name:
            break
        names.append(name)
    return names


def parse_extensions(text: bytes | str) -> list[str]:
    """Split a space-separated extension string into names."""
    if isinstance(text, (bytes, bytearray)):
        text = text.decode("ascii")
    return text.split()


def _attribute_key(key: int) -> ContextAttribute:
    try:
        return ContextAttribute(key)
    except ValueError:
        raise ValueError(f"unknown context attribute: {key!r}") from None


def build_attribute_list(
    attributes: Mapping[int, int] | Iterable[tuple[int, int]],
) -> list[int]:
    """Flatten attribute/value pairs into a zero-terminated integer list."""
    pairs = attributes.items() if isinstance(attributes, Mapping) else attributes
    flat: list[int] = []
    for key, value in pairs:
        attribute = _attribute_key(key)
        if isinstance(value, bool):
            value = ALC_TRUE if value else ALC_FALSE
        if not isinstance(value, int):
            raise TypeError(f"value for {attribute.name} must be an integer: {value!r}")
        if value < 0:
            raise ValueError(f"value for {attribute.name} must not be negative: {value}")
        flat.extend((int(attribute), value))
    flat.append(_TERMINATOR)
    return flat


def parse_attribute_list(values: Iterable[int]) -> dict[ContextAttribute | int, int]:
    """Read attribute/value pairs up to the zero terminator.

    Keys that are not known context attributes are kept as plain integers.
    """
    result: dict[ContextAttribute | int, int] = {}
    items = iter(values)
    for key in items:
        if key == _TERMINATOR:
            break
        try:
            value = next(items)
        except StopIteration:
            raise ValueError(f"attribute {key!r} has no value") from None
        try:
            result[ContextAttribute(key)] = value
        except ValueError:
            result[key] = value
    return result