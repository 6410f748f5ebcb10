from ipaddress import IPv4Address, IPv6Address

import pytest

from creational.core import ConfigurationError
from creational.devices import (
    DeviceFamily,
    DeviceFamilyFactory,
    PhilipsDeviceFactory,
    SamsungDeviceFactory,
)


@pytest.mark.parametrize("family, expected", [
    ("Samsung", SamsungDeviceFactory),
    ("philips", PhilipsDeviceFactory),
    (DeviceFamily.SAMSUNG, SamsungDeviceFactory),
    (DeviceFamily.PHILIPS, PhilipsDeviceFactory),
])
def test_create_selects_family(family, expected):
    factory = DeviceFamilyFactory.create(family, "::1", 3000)
    assert isinstance(factory, expected)


def test_create_builds_family_config():
    factory = DeviceFamilyFactory.create("Philips", "::1:1", 8080)
    assert factory.config.brand == "Philips"
    assert factory.config.address == IPv6Address("::1:1")
    assert factory.config.port == 8080


def test_create_accepts_ipv4():
    factory = DeviceFamilyFactory.create("Samsung", "192.168.1.20", "3000")
    assert factory.config.address == IPv4Address("192.168.1.20")
    assert factory.config.port == 3000


@pytest.mark.parametrize("family", ["LG", "", "samsung-pro"])
def test_unknown_family_is_rejected(family):
    with pytest.raises(ConfigurationError, match="Unknown device family"):
        DeviceFamilyFactory.create(family, "::1", 3000)


@pytest.mark.parametrize("address, port", [
    ("not-an-ip", 3000),
    ("::1", 70000),
    ("::1", -1),
    ("::1", "http"),
])
def test_invalid_endpoint_is_rejected(address, port):
    with pytest.raises(ConfigurationError):
        DeviceFamilyFactory.create("Samsung", address, port)


def test_available_families():
    assert set(DeviceFamilyFactory.get_available_families()) >= {"samsung", "philips"}


def test_register_family_replaces_factory(monkeypatch):
    class QuietSamsung(SamsungDeviceFactory):
        pass

    monkeypatch.setitem(DeviceFamilyFactory._registry, DeviceFamily.SAMSUNG, SamsungDeviceFactory)
    DeviceFamilyFactory.register_family(QuietSamsung)
    assert isinstance(DeviceFamilyFactory.create("Samsung", "::1", 3000), QuietSamsung)


def test_registry_is_keyed_by_declared_family():
    for family, factory_class in DeviceFamilyFactory._registry.items():
        assert factory_class.family is family
