# enginecore

Small, dependency-free building blocks for a game engine.

- `enginecore.console`: `format_time()` and `print_time()` produce a
  `[h:m:s] -> ` prefix for log lines (standard output by default).
- `enginecore.timer`: `Timer`, an accumulating stopwatch built on any clock
  function, with `run()`, `stop()`, `reset()`, `elapsed()`, `set_time()`,
  `add_time()` and `subtract_time()`.
- `enginecore.sequences`: `index_of()` (first index of a value, or -1) and
  `take()` (the first *n* items as a new list).
- `enginecore.colors`: the `Color` enum of named colours, the frozen `RGB` and
  `RGBA` dataclasses, and `convert_color()`.
- `enginecore.alc`: the `AlcParam`, `AlcError` and `ContextAttribute` enums,
  `error_name()`, and helpers to read device specifier lists
  (`parse_specifier_list()`), extension strings (`parse_extensions()`) and
  zero-terminated context attribute lists (`build_attribute_list()`,
  `parse_attribute_list()`).
- `enginecore.efx`: effect, filter, effect-slot and source parameter enums, with
  `effect_params()` and `filter_params()` to find the parameters of a type.
- `enginecore.efx_limits`: `ParameterRange` (`contains()`, `clamp()`), the
  `Waveform`, `Phoneme` and `ShifterDirection` enums, and ranges, defaults and
  validation for filters, source properties and the listener's metres per unit.
- `enginecore.efx_ranges`: `effect_range()`, `effect_defaults()` and
  `validate_effect_value()` for every effect type.

## Install

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## Examples

```python
import time
from enginecore.timer import Timer
from enginecore.colors import Color, RGB, RGBA, convert_color

timer = Timer(time.monotonic)
timer.run()
# ... work ...
timer.stop()
print(timer.elapsed())

print(convert_color(Color.CORAL))
# RGBA(red=255.0, green=127.0, blue=80.0, alpha=255.0)
opaque = RGBA.from_rgb(RGB.from_color(Color.NAVY))
```

```python
from enginecore.efx import EffectType, ReverbParam
from enginecore.efx_ranges import effect_range, validate_effect_value

rng = effect_range(EffectType.REVERB, ReverbParam.DECAY_TIME)
print(rng.clamp(30.0))                  # 20.0
validate_effect_value(EffectType.REVERB, ReverbParam.GAIN, 0.5)
```

```python
from enginecore.alc import parse_specifier_list, build_attribute_list, ContextAttribute

parse_specifier_list(b"Speakers\0Headphones\0\0")  # ['Speakers', 'Headphones']
build_attribute_list({ContextAttribute.FREQUENCY: 44100})  # [4103, 44100, 0]
```

## What it does not do

The package holds values, tables and small helpers only. It does not open
audio devices, create contexts, play or capture sound, open windows or draw
anything, and it has no engine error-code type. It offers no command-line
program.