"""Value ranges and defaults for the parameters of every effect type."""

from __future__ import annotations

from collections.abc import Sequence
from enum import IntEnum

from enginecore.efx import (
    AutowahParam,
    ChorusParam,
    CompressorParam,
    DistortionParam,
    EaxReverbParam,
    EchoParam,
    EffectType,
    EqualizerParam,
    FlangerParam,
    FrequencyShifterParam,
    PitchShifterParam,
    ReverbParam,
    RingModulatorParam,
    VocalMorpherParam,
    effect_params,
)
from enginecore.efx_limits import AL_FALSE, AL_TRUE, ParameterRange

PAN_DEFAULT: tuple[float, float, float] = (0.0, 0.0, 0.0)
"""Default reflections and late-reverb pan vector of the EAX reverb."""

_R = ParameterRange
_FLAG = _R(AL_FALSE, AL_TRUE, AL_TRUE)

_EFFECT_RANGES: dict[EffectType, dict[IntEnum, ParameterRange]] = {
    EffectType.REVERB: {
        ReverbParam.DENSITY: _R(0.0, 1.0, 1.0),
        ReverbParam.DIFFUSION: _R(0.0, 1.0, 1.0),
        ReverbParam.GAIN: _R(0.0, 1.0, 0.32),
        ReverbParam.GAINHF: _R(0.0, 1.0, 0.89),
        ReverbParam.DECAY_TIME: _R(0.1, 20.0, 1.49),
        ReverbParam.DECAY_HFRATIO: _R(0.1, 2.0, 0.83),
        ReverbParam.REFLECTIONS_GAIN: _R(0.0, 3.16, 0.05),
        ReverbParam.REFLECTIONS_DELAY: _R(0.0, 0.3, 0.007),
        ReverbParam.LATE_REVERB_GAIN: _R(0.0, 10.0, 1.26),
        ReverbParam.LATE_REVERB_DELAY: _R(0.0, 0.1, 0.011),
        ReverbParam.AIR_ABSORPTION_GAINHF: _R(0.892, 1.0, 0.994),
        ReverbParam.ROOM_ROLLOFF_FACTOR: _R(0.0, 10.0, 0.0),
        ReverbParam.DECAY_HFLIMIT: _FLAG,
    },
    EffectType.EAXREVERB: {
        EaxReverbParam.DENSITY: _R(0.0, 1.0, 1.0),
        EaxReverbParam.DIFFUSION: _R(0.0, 1.0, 1.0),
        EaxReverbParam.GAIN: _R(0.0, 1.0, 0.32),
        EaxReverbParam.GAINHF: _R(0.0, 1.0, 0.89),
        EaxReverbParam.GAINLF: _R(0.0, 1.0, 1.0),
        EaxReverbParam.DECAY_TIME: _R(0.1, 20.0, 1.49),
        EaxReverbParam.DECAY_HFRATIO: _R(0.1, 2.0, 0.83),
        EaxReverbParam.DECAY_LFRATIO: _R(0.1, 2.0, 1.0),
        EaxReverbParam.REFLECTIONS_GAIN: _R(0.0, 3.16, 0.05),
        EaxReverbParam.REFLECTIONS_DELAY: _R(0.0, 0.3, 0.007),
        EaxReverbParam.LATE_REVERB_GAIN: _R(0.0, 10.0, 1.26),
        EaxReverbParam.LATE_REVERB_DELAY: _R(0.0, 0.1, 0.011),
        EaxReverbParam.ECHO_TIME: _R(0.075, 0.25, 0.25),
        EaxReverbParam.ECHO_DEPTH: _R(0.0, 1.0, 0.0),
        EaxReverbParam.MODULATION_TIME: _R(0.04, 4.0, 0.25),
        EaxReverbParam.MODULATION_DEPTH: _R(0.0, 1.0, 0.0),
        EaxReverbParam.AIR_ABSORPTION_GAINHF: _R(0.892, 1.0, 0.994),
        EaxReverbParam.HFREFERENCE: _R(1000.0, 20000.0, 5000.0),
        EaxReverbParam.LFREFERENCE: _R(20.0, 1000.0, 250.0),
        EaxReverbParam.ROOM_ROLLOFF_FACTOR: _R(0.0, 10.0, 0.0),
        EaxReverbParam.DECAY_HFLIMIT: _FLAG,
    },
    EffectType.CHORUS: {
        ChorusParam.WAVEFORM: _R(0, 1, 1),
        ChorusParam.PHASE: _R(-180, 180, 90),
        ChorusParam.RATE: _R(0.0, 10.0, 1.1),
        ChorusParam.DEPTH: _R(0.0, 1.0, 0.1),
        ChorusParam.FEEDBACK: _R(-1.0, 1.0, 0.25),
        ChorusParam.DELAY: _R(0.0, 0.016, 0.016),
    },
    EffectType.DISTORTION: {
        DistortionParam.EDGE: _R(0.0, 1.0, 0.2),
        DistortionParam.GAIN: _R(0.01, 1.0, 0.05),
        DistortionParam.LOWPASS_CUTOFF: _R(80.0, 24000.0, 8000.0),
        DistortionParam.EQCENTER: _R(80.0, 24000.0, 3600.0),
        DistortionParam.EQBANDWIDTH: _R(80.0, 24000.0, 3600.0),
    },
    EffectType.ECHO: {
        EchoParam.DELAY: _R(0.0, 0.207, 0.1),
        EchoParam.LRDELAY: _R(0.0, 0.404, 0.1),
        EchoParam.DAMPING: _R(0.0, 0.99, 0.5),
        EchoParam.FEEDBACK: _R(0.0, 1.0, 0.5),
        EchoParam.SPREAD: _R(-1.0, 1.0, -1.0),
    },
    EffectType.FLANGER: {
        FlangerParam.WAVEFORM: _R(0, 1, 1),
        FlangerParam.PHASE: _R(-180, 180, 0),
        FlangerParam.RATE: _R(0.0, 10.0, 0.27),
        FlangerParam.DEPTH: _R(0.0, 1.0, 1.0),
        FlangerParam.FEEDBACK: _R(-1.0, 1.0, -0.5),
        FlangerParam.DELAY: _R(0.0, 0.004, 0.002),
    },
    EffectType.FREQUENCY_SHIFTER: {
        FrequencyShifterParam.FREQUENCY: _R(0.0, 24000.0, 0.0),
        FrequencyShifterParam.LEFT_DIRECTION: _R(0, 2, 0),
        FrequencyShifterParam.RIGHT_DIRECTION: _R(0, 2, 0),
    },
    EffectType.VOCAL_MORPHER: {
        VocalMorpherParam.PHONEMEA: _R(0, 29, 0),
        VocalMorpherParam.PHONEMEA_COARSE_TUNING: _R(-24, 24, 0),
        VocalMorpherParam.PHONEMEB: _R(0, 29, 10),
        VocalMorpherParam.PHONEMEB_COARSE_TUNING: _R(-24, 24, 0),
        VocalMorpherParam.WAVEFORM: _R(0, 2, 0),
        VocalMorpherParam.RATE: _R(0.0, 10.0, 1.41),
    },
    EffectType.PITCH_SHIFTER: {
        PitchShifterParam.COARSE_TUNE: _R(-12, 12, 12),
        PitchShifterParam.FINE_TUNE: _R(-50, 50, 0),
    },
    EffectType.RING_MODULATOR: {
        RingModulatorParam.FREQUENCY: _R(0.0, 8000.0, 440.0),
        RingModulatorParam.HIGHPASS_CUTOFF: _R(0.0, 24000.0, 800.0),
        RingModulatorParam.WAVEFORM: _R(0, 2, 0),
    },
    EffectType.AUTOWAH: {
        AutowahParam.ATTACK_TIME: _R(0.0001, 1.0, 0.06),
        AutowahParam.RELEASE_TIME: _R(0.0001, 1.0, 0.06),
        AutowahParam.RESONANCE: _R(2.0, 1000.0, 1000.0),
        AutowahParam.PEAK_GAIN: _R(0.00003, 31621.0, 11.22),
    },
    EffectType.COMPRESSOR: {
        CompressorParam.ONOFF: _R(0, 1, 1),
    },
    EffectType.EQUALIZER: {
        EqualizerParam.LOW_GAIN: _R(0.126, 7.943, 1.0),
        EqualizerParam.LOW_CUTOFF: _R(50.0, 800.0, 200.0),
        EqualizerParam.MID1_GAIN: _R(0.126, 7.943, 1.0),
        EqualizerParam.MID1_CENTER: _R(200.0, 3000.0, 500.0),
        EqualizerParam.MID1_WIDTH: _R(0.01, 1.0, 1.0),
        EqualizerParam.MID2_GAIN: _R(0.126, 7.943, 1.0),
        EqualizerParam.MID2_CENTER: _R(1000.0, 8000.0, 3000.0),
        EqualizerParam.MID2_WIDTH: _R(0.01, 1.0, 1.0),
        EqualizerParam.HIGH_GAIN: _R(0.126, 7.943, 1.0),
        EqualizerParam.HIGH_CUTOFF: _R(4000.0, 16000.0, 6000.0),
    },
}

_VECTOR_PARAMS: dict[EffectType, frozenset[IntEnum]] = {
    EffectType.EAXREVERB: frozenset(
        {EaxReverbParam.REFLECTIONS_PAN, EaxReverbParam.LATE_REVERB_PAN}
    ),
}


def _resolve(effect_type: int, param: int) -> tuple[EffectType, IntEnum]:
    params = effect_params(effect_type)
    kind = EffectType(effect_type)
    try:
        return kind, params(param)
    except ValueError:
        raise ValueError(
            f"unknown parameter {param!r} for effect {kind.name}"
        ) from None


def _is_vector(kind: EffectType, key: IntEnum) -> bool:
    return key in _VECTOR_PARAMS.get(kind, frozenset())


def effect_range(effect_type: int, param: int) -> ParameterRange:
    """Return the range of one scalar parameter of an effect type.

    Pan parameters are vectors without a range and raise ValueError.
    """
    kind, key = _resolve(effect_type, param)
    if _is_vector(kind, key):
        raise ValueError(f"parameter {key.name} of {kind.name} is a vector without a range")
    return _EFFECT_RANGES[kind][key]


def effect_defaults(effect_type: int) -> dict[IntEnum, float | tuple[float, float, float]]:
    """Return every parameter of an effect type mapped to its default."""
    params = effect_params(effect_type)
    kind = EffectType(effect_type)
    table = _EFFECT_RANGES[kind]
    return {
        key: PAN_DEFAULT if _is_vector(kind, key) else table[key].default
        for key in params
    }


def validate_effect_value(
    effect_type: int, param: int, value: float | Sequence[float]
) -> float | tuple[float, ...]:
    """Return ``value`` if it is allowed for the effect parameter, else raise ValueError.

    Pan parameters take three numbers and come back as a tuple.
    """
    kind, key = _resolve(effect_type, param)
    if _is_vector(kind, key):
        if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
            raise ValueError(f"{key.name} needs three components: {value!r}")
        vector = tuple(float(component) for component in value)
        if len(vector) != 3:
            raise ValueError(f"{key.name} needs three components, got {len(vector)}")
        return vector
    limits = _EFFECT_RANGES[kind][key]
    if not limits.contains(value):
        raise ValueError(
            f"value {value!r} outside [{limits.minimum!r}, {limits.maximum!r}]"
        )
    return value