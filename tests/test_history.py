"""Tests for the Redis history store. Skipped when Redis is not running."""

from concurrent.futures import ThreadPoolExecutor

import pytest
import redis

from tlahtolli.core.history import HistoryStore, Stats
from tlahtolli.core.translate import build_translator


@pytest.fixture
def client():
    r = redis.Redis(host="localhost", port=6379, db=15)  # db=15 for tests
    try:
        r.ping()
    except redis.ConnectionError:
        pytest.skip("redis not available")
    yield r
    # cleanup after each test
    for key in r.scan_iter("testtlahtolli:*"):
        r.delete(key)


@pytest.fixture
def store(client):
    s = HistoryStore(client, prefix="testtlahtolli", limit=5)
    s.clear()
    return s


def test_record_translation(store):
    item = store.record_translation("s1", "atl", "agua", "na", "es", 1.0)

    history = store.history()
    assert len(history) == 1
    assert history[0] == item
    assert history[0].session_id == "s1"
    assert history[0].confidence_score == 1.0


def test_history_newest_first(store):
    store.record_translation(None, "atl", "agua", "na", "es", 1.0)
    store.record_translation(None, "casa", "calli", "es", "na", 1.0)

    history = store.history()
    assert [h.original_text for h in history] == ["casa", "atl"]


def test_history_trimmed_to_limit(store):
    for i in range(8):
        store.record_translation(None, f"w{i}", f"t{i}", "na", "es", 0.5)

    history = store.history()
    assert len(history) == 5
    assert history[0].original_text == "w7"


def test_history_query_limit(store):
    for i in range(3):
        store.record_translation(None, f"w{i}", f"t{i}", "na", "es", 0.5)
    assert len(store.history(limit=2)) == 2


def test_clear_history(store):
    store.record_translation(None, "atl", "agua", "na", "es", 1.0)
    store.clear_history()
    assert store.history() == []


def test_statistics(store):
    store.record_translation(None, "atl", "agua", "na", "es", 1.0)
    store.record_translation(None, "tletl", "fuego", "na", "es", 1.0)
    store.record_translation(None, "casa", "calli", "es", "na", 1.0)

    stats = store.statistics()
    assert stats.total == 3
    assert stats.na_es == 2
    assert stats.es_na == 1


def test_statistics_concurrent_first_writes(store):
    def record(i):
        store.record_translation(None, f"w{i}", f"t{i}", "na", "es", 1.0)

    with ThreadPoolExecutor(max_workers=8) as pool:
        list(pool.map(record, range(16)))

    stats = store.statistics()
    assert stats.total == 16
    assert stats.na_es == 16
    assert stats.es_na == 0


def test_statistics_seeded_from_existing_history(store, client):
    store.record_translation(None, "atl", "agua", "na", "es", 1.0)
    store.record_translation(None, "casa", "calli", "es", "na", 1.0)
    client.delete("testtlahtolli:stats")

    # a session alone must not count as seeded counters
    store.create_session("pytest")
    store.record_translation(None, "tletl", "fuego", "na", "es", 1.0)

    stats = store.statistics()
    assert stats.total == 3
    assert stats.na_es == 2
    assert stats.es_na == 1
    assert stats.sessions == 1


def test_statistics_empty(store):
    assert store.statistics() == Stats(total=0, na_es=0, es_na=0, sessions=1)


def test_sessions(store):
    s1 = store.create_session("pytest", "10.0.0.1")
    s2 = store.create_session("pytest")

    assert store.get_session(s1.session_id) == s1
    assert [s.session_id for s in store.list_sessions()] == [s1.session_id, s2.session_id]
    assert store.statistics().sessions == 2


def test_session_not_found(store):
    assert store.get_session("missing") is None
    assert store.end_session("missing") is None


def test_end_session(store):
    s = store.create_session("pytest")
    ended = store.end_session(s.session_id)

    assert ended.end_time is not None
    assert store.get_session(s.session_id).end_time == ended.end_time


def test_custom_dictionary(store):
    assert store.add_custom("Atl", "agua", "na", "es") is True
    assert store.add_custom("atl", "AGUA", "na", "es") is False
    assert store.add_custom("atl", "liquido", "na", "es") is True

    saved = store.custom_dictionary()
    assert [s.translated_text for s in saved] == ["liquido", "agua"]


def test_remove_custom(store):
    store.add_custom("atl", "agua", "na", "es")
    item_id = store.custom_dictionary()[0].id

    assert store.remove_custom(item_id) is True
    assert store.custom_dictionary() == []
    assert store.remove_custom(item_id) is False


def test_translator_records_to_store(store):
    translator = build_translator(store)
    translator.translate("tlazocamati", session_id="s1")

    history = store.history()
    assert len(history) == 1
    assert history[0].translated_text == "gracias"
    assert history[0].source_language == "na"
