import pytest

from enginecore.alc import (
    AlcError,
    AlcParam,
    ContextAttribute,
    build_attribute_list,
    error_name,
    parse_attribute_list,
    parse_extensions,
    parse_specifier_list,
)


def test_documented_enum_values():
    assert ContextAttribute(0x1007) is ContextAttribute.FREQUENCY
    assert AlcParam(0x1013) is AlcParam.ALL_DEVICES_SPECIFIER
    assert AlcParam(0x312) is AlcParam.CAPTURE_SAMPLES
    assert error_name(0xA001) == "ALC_INVALID_DEVICE"


def test_error_name_known_codes():
    assert error_name(0) == "ALC_NO_ERROR"
    assert error_name(0xA005) == "ALC_OUT_OF_MEMORY"
    assert error_name(AlcError.INVALID_VALUE) == "ALC_INVALID_VALUE"


def test_error_name_unknown_code():
    with pytest.raises(ValueError):
        error_name(0x1234)


def test_parse_specifier_list_bytes():
    data = b"Device One\0Device Two\0\0"
    assert parse_specifier_list(data) == ["Device One", "Device Two"]


def test_parse_specifier_list_stops_at_empty_entry():
    assert parse_specifier_list("a\0\0b\0\0") == ["a"]


def test_parse_specifier_list_empty():
    assert parse_specifier_list(b"\0") == []
    assert parse_specifier_list("") == []


def test_parse_extensions():
    text = "ALC_ENUMERATE_ALL_EXT ALC_EXT_CAPTURE  ALC_EXT_EFX"
    assert parse_extensions(text) == [
        "ALC_ENUMERATE_ALL_EXT",
        "ALC_EXT_CAPTURE",
        "ALC_EXT_EFX",
    ]
    assert parse_extensions(b"ALC_EXT_EFX") == ["ALC_EXT_EFX"]
    assert parse_extensions("") == []


def test_build_attribute_list_is_zero_terminated():
    flat = build_attribute_list({ContextAttribute.FREQUENCY: 44100})
    assert flat == [0x1007, 44100, 0]


def test_build_attribute_list_empty():
    assert build_attribute_list({}) == [0]


def test_build_attribute_list_bool_sync():
    flat = build_attribute_list([(ContextAttribute.SYNC, True)])
    assert flat == [0x1009, 1, 0]


def test_build_attribute_list_rejects_unknown_key():
    with pytest.raises(ValueError):
        build_attribute_list({0x9999: 1})


def test_build_attribute_list_rejects_bad_value():
    with pytest.raises(TypeError):
        build_attribute_list({ContextAttribute.REFRESH: 1.5})
    with pytest.raises(ValueError):
        build_attribute_list({ContextAttribute.MONO_SOURCES: -1})


def test_attribute_round_trip():
    attributes = {
        ContextAttribute.FREQUENCY: 48000,
        ContextAttribute.REFRESH: 60,
        ContextAttribute.MONO_SOURCES: 255,
        ContextAttribute.STEREO_SOURCES: 1,
    }
    assert parse_attribute_list(build_attribute_list(attributes)) == attributes


def test_parse_attribute_list_ignores_after_terminator():
    parsed = parse_attribute_list([0x1008, 30, 0, 0x1007, 22050])
    assert parsed == {ContextAttribute.REFRESH: 30}


def test_parse_attribute_list_keeps_unknown_keys():
    parsed = parse_attribute_list([0x1992, 1, 0x1007, 44100, 0])
    assert parsed[0x1992] == 1
    assert parsed[ContextAttribute.FREQUENCY] == 44100


def test_parse_attribute_list_without_terminator():
    assert parse_attribute_list([0x1011, 4]) == {ContextAttribute.STEREO_SOURCES: 4}


def test_parse_attribute_list_dangling_key():
    with pytest.raises(ValueError):
        parse_attribute_list([0x1007])