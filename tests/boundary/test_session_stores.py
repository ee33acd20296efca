"""Tests for session store backends.

Both backends are run through the same contract tests; JSON-specific
tests cover the on-disk layout.
"""

import json

import pytest

from lecturelens.boundary.storage import (
    InMemorySessionStore,
    JsonSessionStore,
    get_session_store,
)
from lecturelens.configs.storage import StorageSettings
from lecturelens.core.exceptions import SessionNotFoundError, ValidationError


@pytest.fixture(params=["memory", "json"])
def store(request, tmp_path):
    """Provide each store backend."""
    if request.param == "memory":
        return InMemorySessionStore()
    return JsonSessionStore(data_dir=str(tmp_path))


class TestSessionStoreContract:
    """Behavior shared by every backend."""

    def test_create_and_read(self, store, make_document) -> None:
        documents = [make_document(doc_id="A"), make_document(doc_id="B", content="second")]

        store.create_session("s1", documents)

        assert store.has_session("s1")
        assert store.get_documents("s1") == documents
        assert store.get_records("s1") == []
        assert store.list_sessions() == ["s1"]

    def test_session_without_documents(self, store) -> None:
        """Should allow sessions with zero documents."""
        store.create_session("empty", [])
        assert store.get_documents("empty") == []

    def test_replace_records(self, store, make_document, make_record) -> None:
        store.create_session("s1", [make_document()])
        records = [make_record(record_id="A"), make_record(record_id="B")]

        store.replace_records("s1", records)
        store.replace_records("s1", records[:1])

        assert store.get_records("s1") == records[:1]

    def test_reads_are_snapshots(self, store, make_document, make_record) -> None:
        """Should not let callers mutate stored collections."""
        store.create_session("s1", [make_document()])
        store.replace_records("s1", [make_record()])

        snapshot = store.get_records("s1")
        snapshot.clear()

        assert len(store.get_records("s1")) == 1

    def test_missing_session(self, store) -> None:
        assert not store.has_session("nope")
        with pytest.raises(SessionNotFoundError):
            store.get_documents("nope")
        with pytest.raises(SessionNotFoundError):
            store.get_records("nope")
        with pytest.raises(SessionNotFoundError):
            store.replace_records("nope", [])
        with pytest.raises(SessionNotFoundError):
            store.delete_session("nope")

    def test_duplicate_session_rejected(self, store) -> None:
        store.create_session("s1", [])
        with pytest.raises(ValidationError):
            store.create_session("s1", [])

    def test_delete_session(self, store, make_document, make_record) -> None:
        store.create_session("s1", [make_document()])
        store.replace_records("s1", [make_record()])

        store.delete_session("s1")

        assert not store.has_session("s1")
        assert store.list_sessions() == []


class TestJsonSessionStore:
    """Test the JSON file layout."""

    def test_writes_flat_camel_case_arrays(self, tmp_path, make_document, make_record) -> None:
        store = JsonSessionStore(data_dir=str(tmp_path))
        store.create_session("s1", [make_document(doc_id="A")])
        store.replace_records("s1", [make_record(record_id="A", embedding=[0.5, 0.25])])

        documents = json.loads((tmp_path / "documents_s1.json").read_text(encoding="utf-8"))
        records = json.loads((tmp_path / "embeddings_s1.json").read_text(encoding="utf-8"))

        assert isinstance(documents, list)
        assert documents[0]["id"] == "A"
        assert documents[0]["metadata"]["originalPath"] == "NodeCourse/Intro/lesson1.srt"
        assert records[0]["embedding"] == [0.5, 0.25]
        assert records[0]["metadata"]["isChunk"] is False
        assert records[0]["metadata"]["chunkIndex"] == 0
        assert records[0]["metadata"]["totalChunks"] == 1

    def test_survives_reopen(self, tmp_path, make_document, make_record) -> None:
        """Should read back what an earlier instance wrote."""
        JsonSessionStore(data_dir=str(tmp_path)).create_session("s1", [make_document()])
        JsonSessionStore(data_dir=str(tmp_path)).replace_records("s1", [make_record()])

        reopened = JsonSessionStore(data_dir=str(tmp_path))

        assert reopened.get_documents("s1")[0].metadata.course == "NodeCourse"
        assert reopened.get_records("s1")[0].dimension == 3

    def test_leaves_no_temp_files(self, tmp_path, make_document) -> None:
        store = JsonSessionStore(data_dir=str(tmp_path))
        store.create_session("s1", [make_document()])

        assert sorted(p.name for p in tmp_path.iterdir()) == ["documents_s1.json"]

    @pytest.mark.parametrize("session_id", ["../escape", "a/b", "", "with space"])
    def test_rejects_unsafe_ids(self, tmp_path, session_id: str) -> None:
        store = JsonSessionStore(data_dir=str(tmp_path))
        with pytest.raises(ValidationError):
            store.create_session(session_id, [])

    def test_corrupt_file_raises(self, tmp_path) -> None:
        """Should treat malformed session files as a hard error."""
        (tmp_path / "documents_s1.json").write_text("{not json", encoding="utf-8")
        store = JsonSessionStore(data_dir=str(tmp_path))

        with pytest.raises(ValidationError):
            store.get_documents("s1")


class TestStoreFactory:
    """Test backend selection."""

    def test_memory_backend(self) -> None:
        store = get_session_store(StorageSettings(backend="memory"))
        assert isinstance(store, InMemorySessionStore)

    def test_json_backend(self, tmp_path) -> None:
        store = get_session_store(StorageSettings(backend="JSON", data_dir=str(tmp_path)))
        assert isinstance(store, JsonSessionStore)

    def test_invalid_backend(self) -> None:
        with pytest.raises(ValueError):
            get_session_store(StorageSettings(backend="redis"))
