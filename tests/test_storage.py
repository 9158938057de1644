"""Tests for the local store and saved analysis history"""
import json
import pytest
from skillmatch.matching import JobMatch, SavedAnalysis
from skillmatch.storage import LocalStore, AnalysisHistory, ANALYSES_KEY


@pytest.fixture
def match():
    return JobMatch(
        match_score=40,
        matching_skills=["React"],
        missing_skills=["AWS"],
        partial_skills=["GraphQL", "Kubernetes", "MongoDB"],
    )


def test_memory_store_roundtrip():
    store = LocalStore()
    store.set("k", {"a": 1})
    assert store.get("k") == {"a": 1}
    assert "k" in store
    store.remove("k")
    assert store.get("k", "missing") == "missing"


def test_file_store_persists(tmp_path):
    path = tmp_path / "nested" / "store.json"
    LocalStore(path).set("rj_token", "demo-token")

    assert json.loads(path.read_text())["rj_token"] == "demo-token"
    assert LocalStore(path).get("rj_token") == "demo-token"


def test_file_store_ignores_corrupt_file(tmp_path):
    path = tmp_path / "store.json"
    path.write_text("{not json")
    store = LocalStore(path)
    assert store.get("anything") is None
    store.set("x", 1)
    assert json.loads(path.read_text()) == {"x": 1}


def test_history_accumulates_with_timestamps(match):
    stamps = iter(["2024-01-01T00:00:00Z", "2024-01-02T00:00:00Z"])
    history = AnalysisHistory(LocalStore(), clock=lambda: next(stamps))

    history.save(match)
    history.save(match.model_copy(update={"match_score": 60}))
    saved = history.list()

    assert len(saved) == 2
    assert all(isinstance(s, SavedAnalysis) for s in saved)
    assert [s.timestamp for s in saved] == ["2024-01-01T00:00:00Z", "2024-01-02T00:00:00Z"]
    assert [s.match_score for s in saved] == [40, 60]


def test_history_stored_with_camel_case_keys(match):
    store = LocalStore()
    AnalysisHistory(store).save(match)
    raw = store.get(ANALYSES_KEY)

    assert len(raw) == 1
    assert raw[0]["matchScore"] == 40
    assert raw[0]["timestamp"].endswith("Z")


def test_history_skips_malformed_records(match):
    store = LocalStore()
    store.set(ANALYSES_KEY, [{"bogus": True}])
    history = AnalysisHistory(store)
    history.save(match)
    assert len(history.list()) == 1


def test_file_store_ignores_undecodable_file(tmp_path):
    path = tmp_path / "store.json"
    path.write_bytes(b"\xff\xfe{not json")

    store = LocalStore(path)

    assert store.get("rj_token") is None
    store.set("rj_token", "demo-token")
    assert json.loads(path.read_text())["rj_token"] == "demo-token"


def test_history_ignores_non_list_value(match):
    store = LocalStore()
    store.set(ANALYSES_KEY, 5)
    history = AnalysisHistory(store)

    assert history.list() == []
    history.save(match)
    assert len(history.list()) == 1
