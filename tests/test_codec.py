from dataclasses import dataclass, field
from datetime import timedelta
from pathlib import Path
from typing import Dict, FrozenSet, List, Optional, Set, Tuple

import pytest

from confstore.core.codec import convert, populate, to_plain
from confstore.core.duration import Duration
from confstore.core.errors import DurationParseError
from confstore.core.store import ConfigStore


@dataclass
class Server:
    host: str = "localhost"
    port: int = 8080


@dataclass
class AppConfig:
    name: str = "app"
    ratio: float = 0.5
    timeout: Duration = field(default_factory=lambda: Duration(seconds=30))
    server: Server = field(default_factory=Server)
    mirrors: List[Server] = field(default_factory=list)
    labels: Dict[str, str] = field(default_factory=dict)
    retry_after: Optional[Duration] = None
    window: Tuple[int, ...] = ()


def test_to_plain_nested():
    cfg = AppConfig(mirrors=[Server("a", 1)], window=(1, 2))
    assert to_plain(cfg) == {
        "name": "app",
        "ratio": 0.5,
        "timeout": "30s",
        "server": {"host": "localhost", "port": 8080},
        "mirrors": [{"host": "a", "port": 1}],
        "labels": {},
        "retry_after": None,
        "window": [1, 2],
    }


def test_to_plain_renders_plain_timedelta():
    assert to_plain({"wait": timedelta(minutes=5)}) == {"wait": "5m0s"}


def test_populate_dataclass_overlay():
    cfg = AppConfig()
    server = cfg.server
    populate(
        cfg,
        {
            "ratio": 1,
            "timeout": "1h30m0s",
            "server": {"port": 9000},
            "mirrors": [{"host": "m1", "port": 1}],
            "retry_after": "5s",
            "window": [3, 4],
            "unknown": True,
        },
    )
    assert cfg.name == "app"
    assert cfg.ratio == 1.0 and isinstance(cfg.ratio, float)
    assert cfg.timeout == timedelta(seconds=5400)
    assert isinstance(cfg.timeout, Duration)
    assert cfg.server is server
    assert cfg.server == Server("localhost", 9000)
    assert cfg.mirrors == [Server("m1", 1)]
    assert cfg.retry_after == timedelta(seconds=5)
    assert cfg.window == (3, 4)
    assert not hasattr(cfg, "unknown")


def test_populate_bad_duration():
    with pytest.raises(DurationParseError):
        populate(AppConfig(), {"timeout": "not-a-duration"})


def test_populate_requires_mapping_for_dataclass():
    with pytest.raises(TypeError):
        populate(AppConfig(), ["not", "a", "mapping"])


def test_populate_list_replaces_contents():
    target = [1, 2, 3]
    populate(target, [4])
    assert target == [4]


def test_populate_unsupported_target():
    with pytest.raises(TypeError):
        populate("immutable", {"a": 1})


def test_convert_optional_none():
    assert convert(None, Optional[Duration]) is None


@dataclass
class Tags:
    names: Set[str] = field(default_factory=set)
    frozen: FrozenSet[int] = frozenset()


def test_convert_sets():
    assert convert(["a", "b"], Set[str]) == {"a", "b"}
    assert convert([1], FrozenSet[int]) == frozenset({1})


@pytest.mark.parametrize("ext", ["json", "yaml", "toml"])
def test_set_fields_round_trip(tmp_path: Path, ext: str):
    store = ConfigStore()
    path = tmp_path / f"tags.{ext}"
    tags = Tags(names={"a", "b"}, frozen=frozenset({3}))
    store.save(path, tags)
    loaded = store.load(path, Tags())
    assert loaded == tags
    assert isinstance(loaded.frozen, frozenset)
