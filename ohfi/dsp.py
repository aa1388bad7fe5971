"""Per-sample bitcrushing and downsampling."""

from __future__ import annotations

import math
import random

from .params import (
    BitcrusherParams,
    DownsamplerParams,
    DownsamplerState,
    NonRTPCParams,
    RTPCParams,
    SignalFlow,
)

MIN_SIGNAL_AMP = -1.0
MAX_SIGNAL_AMP = 1.0
MIN_BIT_DEPTH = 1.0
MAX_BIT_DEPTH = 24.0
MIN_DOWNSAMPLE_FACTOR = 1.0
MAX_DOWNSAMPLE_FACTOR = 160.0


def _clamp(value: float, low: float, high: float) -> float:
    return min(max(value, low), high)


def _round_half_away(value: float) -> float:
    return math.copysign(math.floor(abs(value) + 0.5), value)


def db_to_linear(db: float) -> float:
    """Convert decibels to a linear gain factor."""
    return 10.0 ** (db / 20.0)


def bitcrush(sample: float, params: BitcrusherParams, rng=None) -> float:
    """Quantise a sample to the configured bit depth, optionally dithered."""
    if params.bit_depth <= MIN_BIT_DEPTH or params.wet_dry_mix < 0:
        return sample

    bit_depth = _clamp(params.bit_depth, MIN_BIT_DEPTH, MAX_BIT_DEPTH)
    step = 2.0 / (2.0 ** bit_depth)

    dither = 0.0
    if params.apply_dither:
        source = rng if rng is not None else random
        dither = (source.random() - 0.5) * step

    wet = params.wet_dry_mix / 100
    dry = 1 - wet
    quantised = _round_half_away(sample / step) * step
    return (quantised + dither) * wet + sample * dry


def downsample(
    sample: float,
    state: DownsamplerState,
    params: DownsamplerParams,
    force: bool = False,
) -> float:
    """Sample-and-hold downsampling; updates ``state`` in place."""
    if params.factor <= MIN_DOWNSAMPLE_FACTOR or params.wet_dry_mix <= 0:
        return sample

    rate = _clamp(params.factor, MIN_DOWNSAMPLE_FACTOR, MAX_DOWNSAMPLE_FACTOR)
    alpha = state.sample_counter / rate

    state.sample_counter += 1
    if state.sample_counter >= rate or force:
        state.held_sample = sample
        state.sample_counter = max(state.sample_counter - rate, 0.0)

    wet = params.wet_dry_mix / 100
    dry = 1 - wet

    if params.interpolation:
        return sample + (alpha * (state.held_sample - sample)) * wet + sample * dry
    return state.held_sample * wet + sample * dry


def process(sample: float, state: NonRTPCParams, params: RTPCParams, rng=None) -> float:
    """Run both stages on one sample in the configured order and mix the output."""
    if params.output.wet_dry_mix <= 0:
        return sample

    original = sample
    flow = params.input.signal_flow
    held = state.downsampler

    if flow == SignalFlow.SERIES_DOBI:
        sample = downsample(sample, held, params.downsampler)
        sample = bitcrush(sample, params.bitcrusher, rng)
    elif flow == SignalFlow.PARALLEL:
        crushed = bitcrush(sample, params.bitcrusher, rng)
        sample = downsample(sample, held, params.downsampler)
        sample = sample * 0.5 + crushed * 0.5
    else:
        sample = bitcrush(sample, params.bitcrusher, rng)
        sample = downsample(sample, held, params.downsampler)

    wet = params.output.wet_dry_mix / 100
    dry = 1 - wet
    return sample * wet * db_to_linear(params.output.gain_reduction) + original * dry