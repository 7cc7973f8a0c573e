import pytest
import tempfile
from pathlib import Path

from errors import ErrorKind, PersistenceError
from store import KeyValueStore, MemoryStore


@pytest.fixture
def temp_dir_fixture():
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def memory_store():
    return MemoryStore()


class FlakyStore(KeyValueStore):
    """MemoryStore wrapper whose reads/writes can be switched to fail."""

    def __init__(self):
        self.inner = MemoryStore()
        self.fail_get = False
        self.fail_set = False
        self.fail_remove = False

    def get(self, key):
        if self.fail_get:
            raise PersistenceError(ErrorKind.LOAD_FAILED, "read failed", key=key)
        return self.inner.get(key)

    def set(self, key, blob):
        if self.fail_set:
            raise PersistenceError(ErrorKind.SAVE_FAILED, "disk full", key=key, diagnosis="no space")
        self.inner.set(key, blob)

    def remove(self, key):
        if self.fail_remove:
            raise PersistenceError(ErrorKind.SAVE_FAILED, "remove failed", key=key)
        self.inner.remove(key)


@pytest.fixture
def flaky_store():
    return FlakyStore()


class RecordingSurface:
    """Presentation surface that records every call it receives."""

    def __init__(self):
        self.calls = []
        self.view = []

    def render(self, result):
        self.calls.append(("render", result))

    def render_log_entry(self, entry):
        self.calls.append(("render_log_entry", entry))
        self.view.insert(0, entry)

    def remove_log_entry_from_view(self, entry_id):
        self.calls.append(("remove_log_entry_from_view", entry_id))
        self.view = [e for e in self.view if e.id != entry_id]

    def clear_log_view(self):
        self.calls.append(("clear_log_view",))
        self.view = []

    def mark_invalid_field(self, field):
        self.calls.append(("mark_invalid_field", field))

    def show_inputs(self, a, b):
        self.calls.append(("show_inputs", a, b))

    def render_warning(self, error):
        self.calls.append(("render_warning", error))

    def calls_named(self, name):
        return [c for c in self.calls if c[0] == name]


@pytest.fixture
def recording_surface():
    return RecordingSurface()
