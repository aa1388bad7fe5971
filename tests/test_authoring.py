import struct

import pytest

from ohfi.authoring import OhFiPlugin


def _decode(data):
    return struct.unpack("<3f", data)


def test_bank_block_is_three_floats():
    assert len(OhFiPlugin().get_bank_parameters("pc")) == 12


def test_defaults_follow_engine_defaults():
    assert _decode(OhFiPlugin().get_bank_parameters("pc")) == (24.0, 1.0, 100.0)


def test_values_written_in_order():
    plugin = OhFiPlugin()
    plugin.set_property("pc", "WetDryMix", 50.0)
    plugin.set_property("pc", "BitDepth", 8.0)
    plugin.set_property("pc", "DownsampleFactor", 4.0)
    assert _decode(plugin.get_bank_parameters("pc")) == (8.0, 4.0, 50.0)


def test_platform_value_overrides_shared_value():
    plugin = OhFiPlugin()
    plugin.set_property(None, "BitDepth", 12.0)
    plugin.set_property("console", "BitDepth", 6.0)
    assert _decode(plugin.get_bank_parameters("console"))[0] == 6.0
    assert _decode(plugin.get_bank_parameters("pc"))[0] == 12.0


def test_get_property_round_trip():
    plugin = OhFiPlugin()
    plugin.set_property("pc", "DownsampleFactor", 3)
    assert plugin.get_property("pc", "DownsampleFactor") == 3.0


def test_unknown_property_rejected():
    plugin = OhFiPlugin()
    with pytest.raises(KeyError):
        plugin.set_property("pc", "Cutoff", 1.0)
    with pytest.raises(KeyError):
        plugin.get_property("pc", "Cutoff")