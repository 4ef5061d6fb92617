"""
Pytest configuration and shared fixtures for shopin tests.
"""
import os
import tempfile

# Keep the logger's file sink and default profile out of the working tree
os.environ.setdefault("SHOPIN_HOME", tempfile.mkdtemp(prefix="shopin-tests-"))

import pytest
from loguru import logger

from shopin.models import Recipe
from shopin.profile import Profile
from shopin.runtime import RuntimeContext, set_runtime_context
from shopin.state.collection import RecordCollection
from shopin.storage.kv import MemoryKeyValueStore
from shopin.storage.record_store import RecordStore


@pytest.fixture
def kv():
    return MemoryKeyValueStore()


@pytest.fixture
def store(kv):
    return RecordStore(kv)


@pytest.fixture
def collection(store):
    return RecordCollection(store)


@pytest.fixture
def profile(tmp_path):
    return Profile(name="test", home=tmp_path)


@pytest.fixture
def runtime(profile, kv):
    """Install a runtime context backed by memory for the duration of a test."""
    context = RuntimeContext(profile=profile, kv=kv)
    set_runtime_context(context)
    yield context
    set_runtime_context(None)


@pytest.fixture
def log_messages():
    """Collect formatted loguru messages at WARNING and above."""
    messages = []
    handler_id = logger.add(messages.append, level="WARNING", format="{level}: {message}")
    yield messages
    logger.remove(handler_id)


@pytest.fixture
def soup():
    return Recipe(title="Soup", instructions="Boil", ingredients=["Water", "Salt"])


@pytest.fixture
def bread():
    return Recipe(
        title="Bread",
        instructions="Knead, rest, bake",
        ingredients=["Flour", "Water", "Yeast", "Salt"],
        image=b"\xff\xd8\xff\xe0fake-jpeg\x00\x01",
    )


class FullDiskStore(MemoryKeyValueStore):
    """Memory store whose writes fail once ``full`` is set."""

    def __init__(self):
        super().__init__()
        self.full = False

    def set(self, key, value):
        if self.full:
            raise OSError(28, "No space left on device")
        super().set(key, value)


@pytest.fixture
def full_disk_kv():
    return FullDiskStore()
