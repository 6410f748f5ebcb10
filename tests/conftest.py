import pytest

from creational.devices import DeviceFamilyFactory


@pytest.fixture(params=["Samsung", "Philips"])
def device_factory(request):
    return DeviceFamilyFactory.create(request.param, "::1", 3000)


@pytest.fixture
def write_file(tmp_path):
    def _write(name, content):
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path
    return _write
