import logging
from importlib.resources import files
from pathlib import Path

import pytest

import creational
import creational.__main__ as entry
from creational.config.app_config import settings
from creational.core import ConfigurationError, DocumentParseError
from creational.demos import device_demo, document_demo
from creational.documents import DocumentType
from creational.models import DocumentRecord


def test_device_demo_default_families():
    results = device_demo.run()
    assert [r["family"] for r in results] == ["Samsung", "Philips"]
    assert all(r["light_bulb_on"] and r["fan_on"] for r in results)


def test_device_demo_logs_transitions(caplog):
    with caplog.at_level(logging.INFO):
        device_demo.run([("Samsung", "::1", 3000)])
    messages = [record.getMessage() for record in caplog.records]
    assert any("state=SPEED_4" in m for m in messages)
    assert any(m.startswith("new state ::") and "state=True" in m for m in messages)


def test_device_demo_unknown_family_aborts():
    with pytest.raises(ConfigurationError):
        device_demo.run([("Samsung", "::1", 3000), ("LG", "::1", 9000)])


def test_document_demo_bundled_files():
    records = document_demo.run()
    assert records == [DocumentRecord(name="Carol", age=27), DocumentRecord(name="Alice", age=30)]


def test_document_demo_custom_dir(tmp_path, caplog):
    (tmp_path / "one.json").write_text('{"name":"Alice","age":30}', encoding="utf-8")
    with caplog.at_level(logging.INFO):
        records = document_demo.run([("one.json", DocumentType.JSON)], data_dir=tmp_path)
    assert records == [DocumentRecord(name="Alice", age=30)]
    assert 'file :: one.json, record :: {"name": "Alice", "age": 30}' in caplog.text


def test_document_demo_propagates_errors(tmp_path):
    (tmp_path / "bad.json").write_text("[]", encoding="utf-8")
    with pytest.raises(DocumentParseError):
        document_demo.run([("bad.json", DocumentType.JSON)], data_dir=tmp_path)


def test_main_exits_non_zero_on_demo_error(monkeypatch, tmp_path):
    monkeypatch.setattr(entry, "configure", lambda: None)
    monkeypatch.setattr(settings, "DATA_DIR", tmp_path)
    with pytest.raises(SystemExit) as excinfo:
        entry.main()
    assert excinfo.value.code == 1


def test_settings_device_families():
    families = settings.device_families()
    assert families == [
        ("Samsung", settings.SAMSUNG_ADDRESS, settings.SAMSUNG_PORT),
        ("Philips", settings.PHILIPS_ADDRESS, settings.PHILIPS_PORT),
    ]


def test_sample_documents_ship_with_the_package():
    data = files("creational") / "data"
    assert data.joinpath("data.csv").is_file()
    assert data.joinpath("data.json").is_file()
    assert settings.DATA_DIR == Path(creational.__file__).parent / "data"


def test_main_runs_outside_the_project_directory(monkeypatch, tmp_path):
    monkeypatch.setattr(entry, "configure", lambda: None)
    monkeypatch.chdir(tmp_path)
    entry.main()


def test_device_demo_rejects_bad_port_setting(monkeypatch):
    monkeypatch.setattr(settings, "SAMSUNG_PORT", "not-a-port")
    with pytest.raises(ConfigurationError, match="port"):
        device_demo.run()
