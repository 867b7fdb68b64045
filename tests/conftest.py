"""Pytest configuration and fixtures."""

import copy
import json
import tempfile
from pathlib import Path
from typing import Any, Optional

import pytest

from automerge_converter import AutomergeConverter, BinaryProbe, DocumentCodec
from automerge_converter.types import CrdtEngineInterface


VALID_ACTOR_ID = "0123456789abcdef0123456789abcdef0123456789abcdef0123456789abcdef"


class InMemoryEngine(CrdtEngineInterface):
    """
    Stand-in engine that stores documents as tagged JSON.

    Non-JSON leaves are coerced with str() the way a permissive engine
    might; empty actor ids and untagged bytes are rejected.
    """

    MAGIC = b"\x85mem\x00"

    def __init__(self):
        self.calls = []

    def create(self, value: Any, actor: Optional[str] = None) -> Any:
        self.calls.append("create")
        if actor is not None and not actor:
            raise ValueError("actor id must not be empty")
        return {"actor": actor, "value": copy.deepcopy(value)}

    def serialize(self, doc: Any) -> bytes:
        self.calls.append("serialize")
        return self.MAGIC + json.dumps(doc, default=str).encode("utf-8")

    def deserialize(self, binary: bytes, actor: Optional[str] = None) -> Any:
        self.calls.append("deserialize")
        if not bytes(binary).startswith(self.MAGIC):
            raise ValueError("not a document")
        doc = json.loads(bytes(binary)[len(self.MAGIC):].decode("utf-8"))
        if actor is not None:
            doc["actor"] = actor
        return doc

    def materialize(self, doc: Any) -> Any:
        self.calls.append("materialize")
        return doc["value"]


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield Path(tmp_dir)


@pytest.fixture
def actor_id():
    return VALID_ACTOR_ID


@pytest.fixture
def engine():
    return InMemoryEngine()


@pytest.fixture
def codec(engine):
    return DocumentCodec(engine)


@pytest.fixture
def probe(codec):
    return BinaryProbe(codec)


@pytest.fixture
def converter(engine):
    return AutomergeConverter(engine)


@pytest.fixture
def sample_data():
    """Document covering every JSON value kind."""
    return {
        "string": "hello",
        "number": 42,
        "boolean": True,
        "nullValue": None,
        "array": [1, 2, 3, "test"],
        "nested": {
            "deep": {
                "value": "nested data"
            }
        }
    }


@pytest.fixture
def unicode_data():
    """Multi-byte and mixed-direction text."""
    return {
        "emoji": "🚀🌟💫",
        "chinese": "你好世界",
        "arabic": "مرحبا بالعالم",
        "mixed": "Hello مرحبا 你好 🌍",
        "special": "Line\nbreak\ttab \"quotes\" \\backslash",
    }


@pytest.fixture
def deep_data():
    """Mapping nested 120 levels deep."""
    data = {"leaf": "bottom"}
    for i in range(120):
        data = {f"level_{i}": data}
    return data


@pytest.fixture
def large_data():
    return {
        "items": [
            {"id": i, "name": f"Item {i}", "active": i % 2 == 0, "data": "-".join([f"data-{i}"] * 10)}
            for i in range(100)
        ]
    }
