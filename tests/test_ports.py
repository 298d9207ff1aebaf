"""Tests for input port naming."""

import pytest

from remote25sl.models import (
    DEFAULT_PORT_NAMES,
    InputPort,
    PortNames,
    port_from_name,
)


@pytest.mark.unit
class TestPortFromName:
    """Exact matching of backend port names."""

    @pytest.mark.parametrize("name,port", [
        ("ReMOTE SL 24:0", InputPort.A),
        ("ReMOTE SL 24:1", InputPort.B),
        ("ReMOTE SL 24:2", InputPort.C),
    ])
    def test_default_names(self, name, port):
        assert port_from_name(name) == port
        assert InputPort.from_name(name) == port

    @pytest.mark.parametrize("name", [
        "",
        "ReMOTE SL 24:3",
        "remote sl 24:0",
        "ReMOTE SL 24:0 ",
        " ReMOTE SL 24:0",
        "ReMOTE SL",
        "Launchpad X MIDI 1",
    ])
    def test_no_normalization(self, name):
        assert port_from_name(name) is None

    def test_custom_binding(self):
        names = {InputPort.A: "Keys", InputPort.B: "Surface", InputPort.C: "Presets"}
        assert port_from_name("Surface", names) == InputPort.B
        assert port_from_name("ReMOTE SL 24:1", names) is None

    def test_default_mapping_covers_every_port(self):
        assert set(DEFAULT_PORT_NAMES) == set(InputPort)
        assert len(set(DEFAULT_PORT_NAMES.values())) == 3

    def test_descriptions(self):
        for port in InputPort:
            assert port.description


@pytest.mark.unit
class TestPortNames:
    """Configured port binding."""

    def test_defaults_match_hardware_names(self):
        assert PortNames().as_mapping() == dict(DEFAULT_PORT_NAMES)

    def test_lookup(self):
        names = PortNames(a="one", b="two", c="three")
        assert names.lookup("two") == InputPort.B
        assert names.lookup("ReMOTE SL 24:1") is None
        assert names.name_for(InputPort.C) == "three"
