"""In-place effect that runs the bitcrusher and downsampler over audio buffers."""

from __future__ import annotations

import random
from collections.abc import MutableSequence, Sequence
from dataclasses import dataclass
from enum import Enum

from .dsp import process
from .params import FXParams

COMPANY_ID = 64
PLUGIN_ID = 24955

DEFAULT_SAMPLE_RATE = 48000
DEFAULT_BIT_DEPTH = 24


class PluginType(Enum):
    """Kind of plug-in as reported to the host."""

    EFFECT = "effect"


class ProcessResult(Enum):
    """Outcome reported by operations that may or may not yield audio."""

    SUCCESS = "success"
    DATA_READY = "data_ready"
    NO_MORE_DATA = "no_more_data"


@dataclass(frozen=True)
class PluginInfo:
    """Static description of the effect."""

    plugin_type: PluginType = PluginType.EFFECT
    is_in_place: bool = True
    can_process_objects: bool = False
    company_id: int = COMPANY_ID
    plugin_id: int = PLUGIN_ID


class OhFiFX:
    """Bitcrushing and downsampling effect that processes buffers in place."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.params: FXParams | None = None
        self.sample_rate = DEFAULT_SAMPLE_RATE
        self.bit_depth = DEFAULT_BIT_DEPTH
        self._rng = rng

    def init(
        self,
        params: FXParams,
        sample_rate: int = DEFAULT_SAMPLE_RATE,
        bit_depth: int = DEFAULT_BIT_DEPTH,
    ) -> None:
        """Attach the parameters and record the audio format."""
        self.params = params
        self.sample_rate = sample_rate
        self.bit_depth = bit_depth

    def reset(self) -> None:
        """Return to the initial state; the effect keeps no state of its own."""

    def plugin_info(self) -> PluginInfo:
        """Describe the effect to the host."""
        return PluginInfo()

    def execute(
        self,
        channels: Sequence[MutableSequence[float]],
        lfe_channel: int | None = None,
        valid_frames: int | None = None,
    ) -> None:
        """Process the first ``valid_frames`` frames of every channel in place.

        The channel at index ``lfe_channel`` is skipped unless LFE processing
        is enabled in the parameters.
        """
        if self.params is None:
            raise RuntimeError("effect used before init()")
        rtpc = self.params.rtpc
        state = self.params.non_rtpc

        for index, channel in enumerate(channels):
            if index == lfe_channel and not rtpc.input.process_lfe:
                continue
            frames = len(channel) if valid_frames is None else min(valid_frames, len(channel))
            for frame in range(frames):
                channel[frame] = process(channel[frame], state, rtpc, self._rng)

    def time_skip(self, frames: int) -> ProcessResult:
        """Skip ``frames`` frames of a virtual voice; audio is always available."""
        return ProcessResult.DATA_READY