"""Effect parameters: identifiers, defaults, parameter blocks and change tracking."""

from __future__ import annotations

import copy
import struct
from dataclasses import dataclass, field
from enum import IntEnum

NUM_PARAMS = 10

# bool, int32, float, bool, float, float, bool, float, float, float (packed, little endian)
_BLOCK_FORMAT = struct.Struct("<?if?ff?fff")
PARAMS_BLOCK_SIZE = _BLOCK_FORMAT.size


class ParamError(ValueError):
    """Raised for an unknown parameter or a malformed parameter block."""


class SignalFlow(IntEnum):
    """Order in which the bitcrusher and downsampler stages run."""

    SERIES_BIDO = 0
    SERIES_DOBI = 1
    PARALLEL = 2


class ParamID(IntEnum):
    """Identifiers of the parameters that can be set one at a time."""

    INPUT_SIGNALFLOW = 0
    INPUT_PROCESSLFE = 1
    BITCRUSHER_BITDEPTH = 2
    BITCRUSHER_APPLYDITHER = 3
    BITCRUSHER_WETDRYMIX = 4
    DOWNSAMPLER_FACTOR = 5
    DOWNSAMPLER_INTERPOLATION = 6
    DOWNSAMPLER_WETDRYMIX = 7
    OUTPUT_GAINREDUCTION = 8
    OUTPUT_WETDRYMIX = 9


def _to_signal_flow(value: int) -> SignalFlow:
    """Unknown flows behave as bitcrush-then-downsample."""
    try:
        return SignalFlow(int(value))
    except ValueError:
        return SignalFlow.SERIES_BIDO


@dataclass
class InputParams:
    process_lfe: bool = False
    signal_flow: SignalFlow = SignalFlow.SERIES_BIDO


@dataclass
class BitcrusherParams:
    bit_depth: float = 24.0
    apply_dither: bool = False
    wet_dry_mix: float = 100.0


@dataclass
class DownsamplerParams:
    factor: float = 1.0
    interpolation: bool = True
    wet_dry_mix: float = 100.0


@dataclass
class OutputParams:
    gain_reduction: float = 0.0
    wet_dry_mix: float = 100.0


@dataclass
class RTPCParams:
    """Parameters that may be driven by game parameters at run time."""

    input: InputParams = field(default_factory=InputParams)
    bitcrusher: BitcrusherParams = field(default_factory=BitcrusherParams)
    downsampler: DownsamplerParams = field(default_factory=DownsamplerParams)
    output: OutputParams = field(default_factory=OutputParams)


@dataclass
class DownsamplerState:
    """Sample-and-hold state of the downsampler."""

    held_sample: float = 0.0
    sample_counter: float = 0.0


@dataclass
class NonRTPCParams:
    """Parameters and state that are not driven by game parameters."""

    downsampler: DownsamplerState = field(default_factory=DownsamplerState)


_SETTERS = {
    ParamID.INPUT_PROCESSLFE: ("input", "process_lfe", bool),
    ParamID.INPUT_SIGNALFLOW: ("input", "signal_flow", _to_signal_flow),
    ParamID.BITCRUSHER_BITDEPTH: ("bitcrusher", "bit_depth", float),
    ParamID.BITCRUSHER_APPLYDITHER: ("bitcrusher", "apply_dither", bool),
    ParamID.BITCRUSHER_WETDRYMIX: ("bitcrusher", "wet_dry_mix", float),
    ParamID.DOWNSAMPLER_FACTOR: ("downsampler", "factor", float),
    ParamID.DOWNSAMPLER_INTERPOLATION: ("downsampler", "interpolation", bool),
    ParamID.DOWNSAMPLER_WETDRYMIX: ("downsampler", "wet_dry_mix", float),
    ParamID.OUTPUT_GAINREDUCTION: ("output", "gain_reduction", float),
    ParamID.OUTPUT_WETDRYMIX: ("output", "wet_dry_mix", float),
}


@dataclass
class FXParams:
    """All parameters of the effect, with tracking of which ones changed."""

    rtpc: RTPCParams = field(default_factory=RTPCParams)
    non_rtpc: NonRTPCParams = field(default_factory=NonRTPCParams)
    _changes: set = field(default_factory=set, init=False, repr=False, compare=False)

    def init(self, block: bytes | None = None) -> None:
        """Load defaults for an empty block, otherwise read the block."""
        if not block:
            self.set_defaults()
        else:
            self.set_params_block(block)

    def set_defaults(self) -> None:
        """Reset every game-driven parameter to its default value."""
        self.rtpc = RTPCParams()
        self._mark_all()

    def set_params_block(self, block: bytes) -> None:
        """Set every parameter from a packed little-endian parameter block."""
        data = bytes(block)
        if len(data) != PARAMS_BLOCK_SIZE:
            raise ParamError(
                f"parameter block must be {PARAMS_BLOCK_SIZE} bytes, got {len(data)}"
            )
        (
            process_lfe,
            signal_flow,
            bit_depth,
            apply_dither,
            crush_mix,
            factor,
            interpolation,
            down_mix,
            gain_reduction,
            out_mix,
        ) = _BLOCK_FORMAT.unpack(data)
        self.rtpc = RTPCParams(
            input=InputParams(process_lfe, _to_signal_flow(signal_flow)),
            bitcrusher=BitcrusherParams(bit_depth, apply_dither, crush_mix),
            downsampler=DownsamplerParams(factor, interpolation, down_mix),
            output=OutputParams(gain_reduction, out_mix),
        )
        self._mark_all()

    def set_param(self, param_id: int, value) -> None:
        """Set a single parameter and record that it changed."""
        try:
            pid = ParamID(param_id)
        except ValueError:
            raise ParamError(f"unknown parameter id: {param_id!r}") from None
        section, name, convert = _SETTERS[pid]
        setattr(getattr(self.rtpc, section), name, convert(value))
        self._changes.add(pid)

    def clone(self) -> FXParams:
        """Return an independent copy with every parameter marked as changed."""
        duplicate = FXParams(copy.deepcopy(self.rtpc), copy.deepcopy(self.non_rtpc))
        duplicate._mark_all()
        return duplicate

    def has_changed(self, param_id: int) -> bool:
        """Whether the parameter changed since the last clear."""
        return param_id in self._changes

    def clear_changes(self) -> None:
        """Forget all recorded changes."""
        self._changes.clear()

    def _mark_all(self) -> None:
        self._changes = set(ParamID)