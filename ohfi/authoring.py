"""Authoring-side plug-in that writes the bank parameter block."""

from __future__ import annotations

import struct
from collections.abc import Hashable

BIT_DEPTH = "BitDepth"
DOWNSAMPLE_FACTOR = "DownsampleFactor"
WET_DRY_MIX = "WetDryMix"

_BANK_ORDER = (BIT_DEPTH, DOWNSAMPLE_FACTOR, WET_DRY_MIX)
_DEFAULTS = {BIT_DEPTH: 24.0, DOWNSAMPLE_FACTOR: 1.0, WET_DRY_MIX: 100.0}
_BANK_FORMAT = struct.Struct("<3f")


class OhFiPlugin:
    """Holds authored property values and serialises them for a bank.

    Values may be set for a specific platform or, with ``platform=None``,
    for every platform; a platform-specific value takes precedence.
    """

    def __init__(self) -> None:
        self._properties: dict[tuple[Hashable | None, str], float] = {}

    def set_property(self, platform: Hashable | None, name: str, value: float) -> None:
        """Set a property for one platform, or for all when ``platform`` is None."""
        if name not in _DEFAULTS:
            raise KeyError(f"unknown property: {name!r}")
        self._properties[(platform, name)] = float(value)

    def get_property(self, platform: Hashable | None, name: str) -> float:
        """Return the value a bank for ``platform`` would carry."""
        if name not in _DEFAULTS:
            raise KeyError(f"unknown property: {name!r}")
        for key in ((platform, name), (None, name)):
            if key in self._properties:
                return self._properties[key]
        return _DEFAULTS[name]

    def get_bank_parameters(self, platform: Hashable | None) -> bytes:
        """Bit depth, downsample factor and wet/dry mix as little-endian float32."""
        return _BANK_FORMAT.pack(*(self.get_property(platform, n) for n in _BANK_ORDER))