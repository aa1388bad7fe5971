# ohfi

A lo-fi audio effect for float samples in the range [-1, 1]. It has two
stages, a bitcrusher and a sample-and-hold downsampler. Each stage has its own
wet/dry mix. An output stage then applies a gain (in dB) and an overall wet/dry
mix. The package has no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Parameters

`ohfi.params.FXParams` holds two groups of values:

- `rtpc`: an `RTPCParams` with the parameters that can change at run time.
  These are split into `input`, `bitcrusher`, `downsampler` and `output`
  sections.
- `non_rtpc`: a `NonRTPCParams` with the downsampler's running state
  (`DownsamplerState`, which has `held_sample` and `sample_counter`).

Each parameter is identified by a `ParamID`:

| Parameter                   | Field                          | Default                  |
|-----------------------------|--------------------------------|--------------------------|
| `INPUT_SIGNALFLOW`          | `input.signal_flow`            | `SignalFlow.SERIES_BIDO` |
| `INPUT_PROCESSLFE`          | `input.process_lfe`            | `False`                  |
| `BITCRUSHER_BITDEPTH`       | `bitcrusher.bit_depth`         | `24.0`                   |
| `BITCRUSHER_APPLYDITHER`    | `bitcrusher.apply_dither`      | `False`                  |
| `BITCRUSHER_WETDRYMIX`      | `bitcrusher.wet_dry_mix`       | `100.0` (%)              |
| `DOWNSAMPLER_FACTOR`        | `downsampler.factor`           | `1.0`                    |
| `DOWNSAMPLER_INTERPOLATION` | `downsampler.interpolation`    | `True`                   |
| `DOWNSAMPLER_WETDRYMIX`     | `downsampler.wet_dry_mix`      | `100.0` (%)              |
| `OUTPUT_GAINREDUCTION`      | `output.gain_reduction`        | `0.0` (dB)               |
| `OUTPUT_WETDRYMIX`          | `output.wet_dry_mix`           | `100.0` (%)              |

`SignalFlow` sets the order of the stages:

- `SERIES_BIDO`: bitcrush, then downsample.
- `SERIES_DOBI`: downsample, then bitcrush.
- `PARALLEL`: run both stages on the input and sum them 1:1.

A signal-flow value that is not one of these is treated as `SERIES_BIDO`.

There are several ways to set parameters:

- `FXParams.init(block)` with an empty block (or `None`) calls
  `set_defaults()`, which restores all the defaults listed above.
- `init(block)` or `set_params_block(block)` with a packed block loads every
  parameter at once. The block is little-endian and packed, in this order:
  `process_lfe` (bool), `signal_flow` (int32), `bit_depth` (float32),
  `apply_dither` (bool), bitcrusher `wet_dry_mix` (float32), `factor`
  (float32), `interpolation` (bool), downsampler `wet_dry_mix` (float32),
  `gain_reduction` (float32), and output `wet_dry_mix` (float32). Its length
  is `ohfi.params.PARAMS_BLOCK_SIZE`.
- `set_param(param_id, value)` changes a single parameter.

An unknown parameter id, or a block whose length is not
`PARAMS_BLOCK_SIZE`, raises `ParamError`, which is a subclass of `ValueError`.

The object also records which parameters have changed. Loading defaults,
loading a block, or calling `clone()` marks every parameter as changed.
`set_param` marks only the parameter it sets. Use `has_changed(param_id)` to
query the record and `clear_changes()` to reset it. `clone()` returns an
independent deep copy.

## Processing

```python
from ohfi.params import FXParams, ParamID
from ohfi.effect import OhFiFX

params = FXParams()
params.init(b"")
params.set_param(ParamID.BITCRUSHER_BITDEPTH, 4.0)
params.set_param(ParamID.DOWNSAMPLER_FACTOR, 8.0)

fx = OhFiFX()
fx.init(params, sample_rate=48000, bit_depth=24)

left = [0.0, 0.1, 0.2, 0.3]
right = [0.0, -0.1, -0.2, -0.3]
fx.execute([left, right], lfe_channel=None, valid_frames=4)
```

`OhFiFX.execute(channels, lfe_channel, valid_frames)` processes each channel
in place. A channel is any mutable sequence of floats. By default every frame
is processed; with `valid_frames`, only the first `valid_frames` frames are.
The channel at index `lfe_channel` is skipped unless `INPUT_PROCESSLFE` is
set. Calling `execute` before `init` raises `RuntimeError`.

Other members of `OhFiFX`:

- `OhFiFX(rng=...)` accepts a `random.Random` to use for dither.
- `plugin_info()` returns a `PluginInfo`. It reports an in-place effect
  (`PluginType.EFFECT`) that does not process objects, together with
  `COMPANY_ID` (64) and `PLUGIN_ID` (24955).
- `reset()` does nothing, because the effect keeps no state of its own.
- `time_skip(frames)` always returns `ProcessResult.DATA_READY`.

The per-sample functions in `ohfi.dsp` can also be called directly:

- `process(sample, state, params, rng=None)` takes a `NonRTPCParams` and an
  `RTPCParams`.
- `bitcrush(sample, params, rng=None)` takes a `BitcrusherParams`.
- `downsample(sample, state, params, force=False)` takes a `DownsamplerState`,
  which it updates, and a `DownsamplerParams`.
- `db_to_linear(db)` converts decibels to a linear gain.

Each function returns the new sample. A bit depth at or below 1, a downsample
factor at or below 1, or an output wet/dry mix at or below 0 leaves the sample
unchanged. Bit depth is clamped to 24 and the downsample factor to 160. When
no `rng` is given, dither comes from the `random` module.

## Authoring

`ohfi.authoring.OhFiPlugin` stores the authored properties `"BitDepth"`,
`"DownsampleFactor"` and `"WetDryMix"`. Their defaults are 24, 1 and 100.

- `set_property(platform, name, value)` sets a property for one platform, or
  for every platform when `platform` is `None`. A value set for a specific
  platform takes precedence.
- `get_property(platform, name)` returns the value that would be written for
  that platform.
- `get_bank_parameters(platform)` returns the three values, in the order
  listed above, as 12 bytes of little-endian float32.

Unknown property names raise `KeyError`.

## What this package does not do

The package processes sample values that are already held in Python sequences.
It does not read or write audio files, talk to sound devices, or run as a
command. It also has no graphical editor for the parameters.