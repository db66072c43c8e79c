import math

import pytest

from enginecore.efx import (
    BandpassParam,
    FilterType,
    LowpassParam,
    SourceParam,
    filter_params,
)
from enginecore.efx_limits import (
    ParameterRange,
    Phoneme,
    ShifterDirection,
    Waveform,
    filter_defaults,
    filter_range,
    meters_per_unit_range,
    source_range,
    validate_filter_value,
)

REAL_FILTERS = [FilterType.LOWPASS, FilterType.HIGHPASS, FilterType.BANDPASS]
RANGED_SOURCE_PARAMS = [
    SourceParam.AIR_ABSORPTION_FACTOR,
    SourceParam.ROOM_ROLLOFF_FACTOR,
    SourceParam.CONE_OUTER_GAINHF,
    SourceParam.DIRECT_FILTER_GAINHF_AUTO,
    SourceParam.AUXILIARY_SEND_FILTER_GAIN_AUTO,
    SourceParam.AUXILIARY_SEND_FILTER_GAINHF_AUTO,
]


def test_range_contains_bounds_inclusive():
    r = ParameterRange(-1.0, 1.0, 0.25)
    assert r.contains(-1.0)
    assert r.contains(1.0)
    assert r.contains(0.25)
    assert not r.contains(1.5)
    assert not r.contains(-1.5)


def test_range_rejects_nan():
    r = ParameterRange(-1.0, 1.0, 0.25)
    assert not r.contains(math.nan)


def test_range_clamp():
    r = ParameterRange(0.0, 2.0, 1.0)
    assert r.clamp(5.0) == r.maximum
    assert r.clamp(-5.0) == r.minimum
    assert r.clamp(1.5) == 1.5


@pytest.mark.parametrize(
    "args",
    [(1.0, 0.0, 0.5), (0.0, 1.0, 2.0), (0.0, 1.0, -0.5)],
)
def test_invalid_range_raises(args):
    with pytest.raises(ValueError):
        ParameterRange(*args)


def test_lowpass_gain_range_pinned():
    assert filter_range(FilterType.LOWPASS, LowpassParam.GAIN) == ParameterRange(0.0, 1.0, 1.0)


def test_filter_range_accepts_plain_ints():
    assert filter_range(int(FilterType.BANDPASS), int(BandpassParam.GAINHF)) == filter_range(
        FilterType.BANDPASS, BandpassParam.GAINHF
    )


@pytest.mark.parametrize("filter_type", REAL_FILTERS)
def test_filter_defaults_cover_all_params_and_lie_in_range(filter_type):
    defaults = filter_defaults(filter_type)
    assert set(defaults) == set(filter_params(filter_type))
    for param, default in defaults.items():
        limits = filter_range(filter_type, param)
        assert limits.default == default
        assert limits.contains(default)


@pytest.mark.parametrize("filter_type", [FilterType.NULL, 0x42])
def test_filter_range_bad_type(filter_type):
    with pytest.raises(ValueError):
        filter_range(filter_type, 1)
    with pytest.raises(ValueError):
        filter_defaults(filter_type)


def test_filter_range_unknown_param():
    with pytest.raises(ValueError):
        filter_range(FilterType.LOWPASS, 0x0003)


def test_validate_filter_value():
    limits = filter_range(FilterType.HIGHPASS, 1)
    assert validate_filter_value(FilterType.HIGHPASS, 1, limits.maximum) == limits.maximum
    with pytest.raises(ValueError):
        validate_filter_value(FilterType.HIGHPASS, 1, limits.maximum + 1.0)
    with pytest.raises(ValueError):
        validate_filter_value(FilterType.HIGHPASS, 1, limits.minimum - 1.0)


@pytest.mark.parametrize("param", RANGED_SOURCE_PARAMS)
def test_source_defaults_in_range(param):
    limits = source_range(param)
    assert limits.contains(limits.default)
    assert limits.minimum <= limits.maximum


def test_source_auto_flags_are_boolean():
    assert source_range(SourceParam.DIRECT_FILTER_GAINHF_AUTO) == ParameterRange(False, True, True)


@pytest.mark.parametrize(
    "param", [SourceParam.DIRECT_FILTER, SourceParam.AUXILIARY_SEND_FILTER, 0x1234]
)
def test_source_range_without_range_raises(param):
    with pytest.raises(ValueError):
        source_range(param)


def test_meters_per_unit_range():
    r = meters_per_unit_range()
    assert r.default == 1.0
    assert r.minimum > 0
    assert not r.contains(0.0)
    assert r.contains(r.default)
    assert r.maximum > r.minimum


@pytest.mark.parametrize("enum_cls", [Waveform, Phoneme, ShifterDirection])
def test_enum_values_are_consecutive_from_zero(enum_cls):
    assert [member.value for member in enum_cls] == list(range(len(enum_cls)))


def test_phoneme_order():
    assert Phoneme(0) is Phoneme.A
    assert Phoneme(14) is Phoneme.UW
    assert Phoneme(15) is Phoneme.B
    assert Phoneme(29) is Phoneme.Z


def test_waveform_and_direction_lookup():
    assert Waveform(Waveform.TRIANGLE.value) is Waveform.TRIANGLE
    assert ShifterDirection(ShifterDirection.OFF.value) is ShifterDirection.OFF
    assert ShifterDirection.DOWN < ShifterDirection.UP < ShifterDirection.OFF