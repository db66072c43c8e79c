"""Effects extension (EFX) enumerations for effects, filters and slots."""

from __future__ import annotations

from enum import IntEnum

ALC_EXT_EFX_NAME = "ALC_EXT_EFX"

ALC_EFX_MAJOR_VERSION = 0x20001
ALC_EFX_MINOR_VERSION = 0x20002
ALC_MAX_AUXILIARY_SENDS = 0x20003

AL_METERS_PER_UNIT = 0x20004
"""Listener property: world units to metres."""

EFFECT_FIRST_PARAMETER = 0x0000
EFFECT_LAST_PARAMETER = 0x8000
EFFECT_TYPE = 0x8001

FILTER_FIRST_PARAMETER = 0x0000
FILTER_LAST_PARAMETER = 0x8000
FILTER_TYPE = 0x8001

EFFECTSLOT_NULL = 0x0000
"""Slot id that disables a source send."""


class EffectType(IntEnum):
    """Values for the effect type property."""

    NULL = 0x0000
    REVERB = 0x0001
    CHORUS = 0x0002
    DISTORTION = 0x0003
    ECHO = 0x0004
    FLANGER = 0x0005
    FREQUENCY_SHIFTER = 0x0006
    VOCAL_MORPHER = 0x0007
    PITCH_SHIFTER = 0x0008
    RING_MODULATOR = 0x0009
    AUTOWAH = 0x000A
    COMPRESSOR = 0x000B
    EQUALIZER = 0x000C
    EAXREVERB = 0x8000


class FilterType(IntEnum):
    """Values for the filter type property."""

    NULL = 0x0000
    LOWPASS = 0x0001
    HIGHPASS = 0x0002
    BANDPASS = 0x0003


class EffectSlotParam(IntEnum):
    """Auxiliary effect slot properties."""

    EFFECT = 0x0001
    GAIN = 0x0002
    AUXILIARY_SEND_AUTO = 0x0003


class SourceParam(IntEnum):
    """Source properties added by the effects extension."""

    DIRECT_FILTER = 0x20005
    AUXILIARY_SEND_FILTER = 0x20006
    AIR_ABSORPTION_FACTOR = 0x20007
    ROOM_ROLLOFF_FACTOR = 0x20008
    CONE_OUTER_GAINHF = 0x20009
    DIRECT_FILTER_GAINHF_AUTO = 0x2000A
    AUXILIARY_SEND_FILTER_GAIN_AUTO = 0x2000B
    AUXILIARY_SEND_FILTER_GAINHF_AUTO = 0x2000C


class ReverbParam(IntEnum):
    """Standard reverb parameters."""

    DENSITY = 0x0001
    DIFFUSION = 0x0002
    GAIN = 0x0003
    GAINHF = 0x0004
    DECAY_TIME = 0x0005
    DECAY_HFRATIO = 0x0006
    REFLECTIONS_GAIN = 0x0007
    REFLECTIONS_DELAY = 0x0008
    LATE_REVERB_GAIN = 0x0009
    LATE_REVERB_DELAY = 0x000A
    AIR_ABSORPTION_GAINHF = 0x000B
    ROOM_ROLLOFF_FACTOR = 0x000C
    DECAY_HFLIMIT = 0x000D


class EaxReverbParam(IntEnum):
    """EAX reverb parameters."""

    DENSITY = 0x0001
    DIFFUSION = 0x0002
    GAIN = 0x0003
    GAINHF = 0x0004
    GAINLF = 0x0005
    DECAY_TIME = 0x0006
    DECAY_HFRATIO = 0x0007
    DECAY_LFRATIO = 0x0008
    REFLECTIONS_GAIN = 0x0009
    REFLECTIONS_DELAY = 0x000A
    REFLECTIONS_PAN = 0x000B
    LATE_REVERB_GAIN = 0x000C
    LATE_REVERB_DELAY = 0x000D
    LATE_REVERB_PAN = 0x000E
    ECHO_TIME = 0x000F
    ECHO_DEPTH = 0x0010
    MODULATION_TIME = 0x0011
    MODULATION_DEPTH = 0x0012
    AIR_ABSORPTION_GAINHF = 0x0013
    HFREFERENCE = 0x0014
    LFREFERENCE = 0x0015
    ROOM_ROLLOFF_FACTOR = 0x0016
    DECAY_HFLIMIT = 0x0017


class ChorusParam(IntEnum):
    """Chorus parameters."""

    WAVEFORM = 0x0001
    PHASE = 0x0002
    RATE = 0x0003
    DEPTH = 0x0004
    FEEDBACK = 0x0005
    DELAY = 0x0006


class DistortionParam(IntEnum):
    """Distortion parameters."""

    EDGE = 0x0001
    GAIN = 0x0002
    LOWPASS_CUTOFF = 0x0003
    EQCENTER = 0x0004
    EQBANDWIDTH = 0x0005


class EchoParam(IntEnum):
    """Echo parameters."""

    DELAY = 0x0001
    LRDELAY = 0x0002
    DAMPING = 0x0003
    FEEDBACK = 0x0004
    SPREAD = 0x0005


class FlangerParam(IntEnum):
    """Flanger parameters."""

    WAVEFORM = 0x0001
    PHASE = 0x0002
    RATE = 0x0003
    DEPTH = 0x0004
    FEEDBACK = 0x0005
    DELAY = 0x0006


class FrequencyShifterParam(IntEnum):
    """Frequency shifter parameters."""

    FREQUENCY = 0x0001
    LEFT_DIRECTION = 0x0002
    RIGHT_DIRECTION = 0x0003


class VocalMorpherParam(IntEnum):
    """Vocal morpher parameters."""

    PHONEMEA = 0x0001
    PHONEMEA_COARSE_TUNING = 0x0002
    PHONEMEB = 0x0003
    PHONEMEB_COARSE_TUNING = 0x0004
    WAVEFORM = 0x0005
    RATE = 0x0006


class PitchShifterParam(IntEnum):
    """Pitch shifter parameters."""

    COARSE_TUNE = 0x0001
    FINE_TUNE = 0x0002


class RingModulatorParam(IntEnum):
    """Ring modulator parameters."""

    FREQUENCY = 0x0001
    HIGHPASS_CUTOFF = 0x0002
    WAVEFORM = 0x0003


class AutowahParam(IntEnum):
    """Autowah parameters."""

    ATTACK_TIME = 0x0001
    RELEASE_TIME = 0x0002
    RESONANCE = 0x0003
    PEAK_GAIN = 0x0004


class CompressorParam(IntEnum):
    """Compressor parameters."""

    ONOFF = 0x0001


class EqualizerParam(IntEnum):
    """Four-band equalizer parameters."""

    LOW_GAIN = 0x0001
    LOW_CUTOFF = 0x0002
    MID1_GAIN = 0x0003
    MID1_CENTER = 0x0004
    MID1_WIDTH = 0x0005
    MID2_GAIN = 0x0006
    MID2_CENTER = 0x0007
    MID2_WIDTH = 0x0008
    HIGH_GAIN = 0x0009
    HIGH_CUTOFF = 0x000A


class LowpassParam(IntEnum):
    """Lowpass filter parameters."""

    GAIN = 0x0001
    GAINHF = 0x0002


class HighpassParam(IntEnum):
    """Highpass filter parameters."""

    GAIN = 0x0001
    GAINLF = 0x0002


class BandpassParam(IntEnum):
    """Bandpass filter parameters."""

    GAIN = 0x0001
    GAINLF = 0x0002
    GAINHF = 0x0003


_EFFECT_PARAMS: dict[EffectType, type[IntEnum]] = {
    EffectType.REVERB: ReverbParam,
    EffectType.CHORUS: ChorusParam,
    EffectType.DISTORTION: DistortionParam,
    EffectType.ECHO: EchoParam,
    EffectType.FLANGER: FlangerParam,
    EffectType.FREQUENCY_SHIFTER: FrequencyShifterParam,
    EffectType.VOCAL_MORPHER: VocalMorpherParam,
    EffectType.PITCH_SHIFTER: PitchShifterParam,
    EffectType.RING_MODULATOR: RingModulatorParam,
    EffectType.AUTOWAH: AutowahParam,
    EffectType.COMPRESSOR: CompressorParam,
    EffectType.EQUALIZER: EqualizerParam,
    EffectType.EAXREVERB: EaxReverbParam,
}

_FILTER_PARAMS: dict[FilterType, type[IntEnum]] = {
    FilterType.LOWPASS: LowpassParam,
    FilterType.HIGHPASS: HighpassParam,
    FilterType.BANDPASS: BandpassParam,
}


def effect_params(effect_type: int) -> type[IntEnum]:
    """Return the parameter enumeration for an effect type.

    Raises ValueError for an unknown type or for the null effect, which
    has no parameters.
    """
    try:
        kind = EffectType(effect_type)
    except ValueError:
        raise ValueError(f"unknown effect type: {effect_type!r}") from None
    try:
        return _EFFECT_PARAMS[kind]
    except KeyError:
        raise ValueError(f"effect type {kind.name} has no parameters") from None


def filter_params(filter_type: int) -> type[IntEnum]:
    """Return the parameter enumeration for a filter type.

    Raises ValueError for an unknown type or for the null filter, which
    has no parameters.
    """
    try:
        kind = FilterType(filter_type)
    except ValueError:
        raise ValueError(f"unknown filter type: {filter_type!r}") from None
    try:
        return _FILTER_PARAMS[kind]
    except KeyError:
        raise ValueError(f"filter type {kind.name} has no parameters") from None