"""Value ranges and defaults for filters, source and listener effect properties."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from enginecore.efx import (
    BandpassParam,
    FilterType,
    HighpassParam,
    LowpassParam,
    SourceParam,
    filter_params,
)

FLT_MIN = 1.1754943508222875e-38
"""Smallest positive normal single-precision float."""

FLT_MAX = 3.4028234663852886e38
"""Largest finite single-precision float."""

AL_FALSE = 0
AL_TRUE = 1

RING_MODULATOR_SINUSOID = 0
RING_MODULATOR_SAWTOOTH = 1
RING_MODULATOR_SQUARE = 2


@dataclass(frozen=True)
class ParameterRange:
    """The permitted span of a parameter and its default value."""

    minimum: float
    maximum: float
    default: float

    def __post_init__(self) -> None:
        if self.minimum > self.maximum:
            raise ValueError(
                f"minimum {self.minimum!r} exceeds maximum {self.maximum!r}"
            )
        if not self.contains(self.default):
            raise ValueError(
                f"default {self.default!r} lies outside "
                f"[{self.minimum!r}, {self.maximum!r}]"
            )

    def contains(self, value: float) -> bool:
        """Whether ``value`` lies within the range, bounds included."""
        return self.minimum <= value <= self.maximum

    def clamp(self, value: float) -> float:
        """Return ``value`` limited to the range."""
        return min(max(value, self.minimum), self.maximum)


class Waveform(IntEnum):
    """LFO waveforms for the chorus, flanger and vocal morpher effects.

    Chorus and flanger accept only sinusoid and triangle.
    """

    SINUSOID = 0
    TRIANGLE = 1
    SAWTOOTH = 2


class Phoneme(IntEnum):
    """Vocal morpher phonemes."""

    A = 0
    E = 1
    I = 2  # noqa: E741
    O = 3  # noqa: E741
    U = 4
    AA = 5
    AE = 6
    AH = 7
    AO = 8
    EH = 9
    ER = 10
    IH = 11
    IY = 12
    UH = 13
    UW = 14
    B = 15
    D = 16
    F = 17
    G = 18
    J = 19
    K = 20
    L = 21
    M = 22
    N = 23
    P = 24
    R = 25
    S = 26
    T = 27
    V = 28
    Z = 29


class ShifterDirection(IntEnum):
    """Frequency shifter direction for each channel."""

    DOWN = 0
    UP = 1
    OFF = 2


_UNIT_GAIN = ParameterRange(0.0, 1.0, 1.0)

_FILTER_RANGES: dict[FilterType, dict[IntEnum, ParameterRange]] = {
    FilterType.LOWPASS: {
        LowpassParam.GAIN: _UNIT_GAIN,
        LowpassParam.GAINHF: _UNIT_GAIN,
    },
    FilterType.HIGHPASS: {
        HighpassParam.GAIN: _UNIT_GAIN,
        HighpassParam.GAINLF: _UNIT_GAIN,
    },
    FilterType.BANDPASS: {
        BandpassParam.GAIN: _UNIT_GAIN,
        BandpassParam.GAINLF: _UNIT_GAIN,
        BandpassParam.GAINHF: _UNIT_GAIN,
    },
}

_AUTO_FLAG = ParameterRange(AL_FALSE, AL_TRUE, AL_TRUE)

_SOURCE_RANGES: dict[SourceParam, ParameterRange] = {
    SourceParam.AIR_ABSORPTION_FACTOR: ParameterRange(0.0, 10.0, 0.0),
    SourceParam.ROOM_ROLLOFF_FACTOR: ParameterRange(0.0, 10.0, 0.0),
    SourceParam.CONE_OUTER_GAINHF: ParameterRange(0.0, 1.0, 1.0),
    SourceParam.DIRECT_FILTER_GAINHF_AUTO: _AUTO_FLAG,
    SourceParam.AUXILIARY_SEND_FILTER_GAIN_AUTO: _AUTO_FLAG,
    SourceParam.AUXILIARY_SEND_FILTER_GAINHF_AUTO: _AUTO_FLAG,
}

_METERS_PER_UNIT = ParameterRange(FLT_MIN, FLT_MAX, 1.0)


def _filter_table(filter_type: int) -> tuple[type[IntEnum], dict[IntEnum, ParameterRange]]:
    params = filter_params(filter_type)
    return params, _FILTER_RANGES[FilterType(filter_type)]


def filter_range(filter_type: int, param: int) -> ParameterRange:
    """Return the range of one parameter of a filter type."""
    params, table = _filter_table(filter_type)
    try:
        key = params(param)
    except ValueError:
        raise ValueError(
            f"unknown parameter {param!r} for filter {FilterType(filter_type).name}"
        ) from None
    return table[key]


def filter_defaults(filter_type: int) -> dict[IntEnum, float]:
    """Return every parameter of a filter type mapped to its default."""
    _, table = _filter_table(filter_type)
    return {param: limits.default for param, limits in table.items()}


def validate_filter_value(filter_type: int, param: int, value: float) -> float:
    """Return ``value`` if it is allowed for the filter parameter, else raise ValueError."""
    limits = filter_range(filter_type, param)
    if not limits.contains(value):
        raise ValueError(
            f"value {value!r} outside [{limits.minimum!r}, {limits.maximum!r}]"
        )
    return value


def source_range(param: int) -> ParameterRange:
    """Return the range of a source property added by the effects extension."""
    try:
        key = SourceParam(param)
    except ValueError:
        raise ValueError(f"unknown source parameter: {param!r}") from None
    try:
        return _SOURCE_RANGES[key]
    except KeyError:
        raise ValueError(f"source parameter {key.name} has no value range") from None


def meters_per_unit_range() -> ParameterRange:
    """Return the range of the listener's metres-per-unit property."""
    return _METERS_PER_UNIT