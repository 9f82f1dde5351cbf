from dataclasses import dataclass, field
from pathlib import Path

import pytest
import yaml

from confstore.core.duration import Duration
from confstore.core.errors import UnmarshalError
from confstore.core.formats import JsonFormat, TomlFormat, YamlFormat
from confstore.core.store import ConfigStore


@dataclass
class Job:
    name: str = "backup"
    interval: Duration = field(default_factory=lambda: Duration(seconds=5400))


@pytest.mark.parametrize("ext", ["json", "yaml", "toml"])
def test_duration_field_written_as_text(tmp_path: Path, ext: str):
    store = ConfigStore()
    path = tmp_path / f"job.{ext}"
    store.save(path, Job())
    assert "1h30m0s" in path.read_text(encoding="utf-8")

    loaded = store.load(path, Job(interval=Duration(0)))
    assert loaded.interval.total_seconds() == 5400


def test_invalid_duration_in_file(tmp_path: Path):
    path = tmp_path / "job.yaml"
    path.write_text("interval: not-a-duration\n", encoding="utf-8")
    with pytest.raises(UnmarshalError) as excinfo:
        ConfigStore().load(path, Job())
    assert "not-a-duration" in str(excinfo.value)


def test_yaml_keeps_field_order():
    text = YamlFormat().serialize(Job()).decode("utf-8")
    assert text.index("name") < text.index("interval")
    assert yaml.safe_load(text) == {"name": "backup", "interval": "1h30m0s"}


def test_yaml_empty_document_leaves_target():
    target = {"a": 1}
    YamlFormat().deserialize(b"", target)
    assert target == {"a": 1}


def test_json_indent():
    assert JsonFormat().serialize({"a": 1}) == b'{\n  "a": 1\n}'
    assert JsonFormat(indent=None).serialize({"a": 1}) == b'{"a": 1}'


def test_json_keeps_unicode():
    assert "café" in JsonFormat().serialize({"name": "café"}).decode("utf-8")


def test_toml_requires_table():
    with pytest.raises(TypeError):
        TomlFormat().serialize([1, 2])
