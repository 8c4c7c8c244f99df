"""
Translation history, sessions, saved words and usage stats.

Storage in Redis. This is the sink the translator reports to after each
translation; the translator never depends on it succeeding.
"""

import json
import uuid
from dataclasses import dataclass
from datetime import datetime

import redis


def _now() -> str:
    return datetime.utcnow().isoformat()


@dataclass
class HistoryItem:
    id: str
    original_text: str
    translated_text: str
    source_language: str
    target_language: str
    timestamp: str
    session_id: str | None = None
    confidence_score: float | None = None

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "original_text": self.original_text,
            "translated_text": self.translated_text,
            "source_language": self.source_language,
            "target_language": self.target_language,
            "timestamp": self.timestamp,
            "session_id": self.session_id,
            "confidence_score": self.confidence_score,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "HistoryItem":
        return cls(
            id=data["id"],
            original_text=data["original_text"],
            translated_text=data["translated_text"],
            source_language=data["source_language"],
            target_language=data["target_language"],
            timestamp=data["timestamp"],
            session_id=data.get("session_id"),
            confidence_score=data.get("confidence_score"),
        )


@dataclass
class Session:
    session_id: str
    start_time: str
    device_info: str
    ip_address: str
    end_time: str | None = None

    def to_dict(self) -> dict:
        return {
            "session_id": self.session_id,
            "start_time": self.start_time,
            "device_info": self.device_info,
            "ip_address": self.ip_address,
            "end_time": self.end_time,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Session":
        return cls(
            session_id=data["session_id"],
            start_time=data["start_time"],
            device_info=data["device_info"],
            ip_address=data["ip_address"],
            end_time=data.get("end_time"),
        )


@dataclass(frozen=True)
class Stats:
    total: int
    na_es: int
    es_na: int
    sessions: int

    def to_dict(self) -> dict:
        return {
            "total": self.total,
            "na_es": self.na_es,
            "es_na": self.es_na,
            "sessions": self.sessions,
        }


class HistoryStore:
    """Stores history and sessions in Redis."""

    def __init__(self, client: redis.Redis, prefix: str = "tlahtolli", limit: int = 1000):
        self.client = client
        self.prefix = prefix
        self.limit = limit

    def _history_key(self) -> str:
        return f"{self.prefix}:history"

    def _saved_key(self) -> str:
        return f"{self.prefix}:saved"

    def _stats_key(self) -> str:
        return f"{self.prefix}:stats"

    def _session_key(self, session_id: str) -> str:
        return f"{self.prefix}:session:{session_id}"

    def _sessions_key(self) -> str:
        return f"{self.prefix}:sessions"

    # === History ===

    def record_translation(
        self,
        session_id: str | None,
        original: str,
        translated: str,
        source_lang: str,
        target_lang: str,
        confidence: float,
    ) -> HistoryItem:
        """Prepend a history item, trim to the limit, bump counters."""
        item = HistoryItem(
            id=uuid.uuid4().hex[:12],
            original_text=original,
            translated_text=translated,
            source_language=source_lang,
            target_language=target_lang,
            timestamp=_now(),
            session_id=session_id,
            confidence_score=confidence,
        )

        payload = json.dumps(item.to_dict())
        counter = "na_es" if source_lang == "na" else "es_na"

        def write(pipe):
            seed = None
            if not pipe.hexists(self._stats_key(), "total"):
                # seed counters from whatever history already exists
                seed = self._recalculate(pipe).to_dict()

            pipe.multi()
            pipe.lpush(self._history_key(), payload)
            pipe.ltrim(self._history_key(), 0, self.limit - 1)
            if seed is None:
                pipe.hincrby(self._stats_key(), "total", 1)
                pipe.hincrby(self._stats_key(), counter, 1)
            else:
                seed["total"] += 1
                seed[counter] += 1
                pipe.hset(self._stats_key(), mapping=seed)

        # retried if another writer touches history or counters meanwhile
        self.client.transaction(write, self._stats_key(), self._history_key())
        return item

    def history(self, limit: int = 1000) -> list[HistoryItem]:
        raw = self.client.lrange(self._history_key(), 0, limit - 1)
        return [HistoryItem.from_dict(json.loads(r)) for r in raw]

    def clear_history(self) -> None:
        self.client.delete(self._history_key())

    # === Saved words ===

    def add_custom(
        self,
        word: str,
        translation: str,
        source_lang: str,
        target_lang: str,
        session_id: str | None = None,
    ) -> bool:
        """Save a word pair. Returns False if the pair is already saved."""
        for item in self.custom_dictionary():
            if (item.original_text.lower() == word.lower()
                    and item.translated_text.lower() == translation.lower()):
                return False

        item = HistoryItem(
            id=uuid.uuid4().hex[:12],
            original_text=word,
            translated_text=translation,
            source_language=source_lang,
            target_language=target_lang,
            timestamp=_now(),
            session_id=session_id,
        )
        self.client.lpush(self._saved_key(), json.dumps(item.to_dict()))
        return True

    def custom_dictionary(self) -> list[HistoryItem]:
        raw = self.client.lrange(self._saved_key(), 0, -1)
        return [HistoryItem.from_dict(json.loads(r)) for r in raw]

    def remove_custom(self, item_id: str) -> bool:
        for raw in self.client.lrange(self._saved_key(), 0, -1):
            if json.loads(raw)["id"] == item_id:
                self.client.lrem(self._saved_key(), 1, raw)
                return True
        return False

    # === Sessions ===

    def create_session(self, device_info: str, ip_address: str = "127.0.0.1") -> Session:
        session = Session(
            session_id=uuid.uuid4().hex,
            start_time=_now(),
            device_info=device_info,
            ip_address=ip_address,
        )
        self.client.set(self._session_key(session.session_id), json.dumps(session.to_dict()))
        self.client.rpush(self._sessions_key(), session.session_id)
        self.client.hset(self._stats_key(), "sessions", self.client.llen(self._sessions_key()))
        return session

    def get_session(self, session_id: str) -> Session | None:
        data = self.client.get(self._session_key(session_id))
        if not data:
            return None
        return Session.from_dict(json.loads(data))

    def end_session(self, session_id: str) -> Session | None:
        session = self.get_session(session_id)
        if session is None:
            return None
        session.end_time = _now()
        self.client.set(self._session_key(session_id), json.dumps(session.to_dict()))
        return session

    def list_sessions(self) -> list[Session]:
        sessions = []
        for sid in self.client.lrange(self._sessions_key(), 0, -1):
            session = self.get_session(sid.decode())
            if session:
                sessions.append(session)
        return sessions

    # === Stats ===

    def _recalculate(self, client=None) -> Stats:
        if client is None:
            client = self.client
        history = [
            HistoryItem.from_dict(json.loads(r))
            for r in client.lrange(self._history_key(), 0, self.limit - 1)
        ]
        return Stats(
            total=len(history),
            na_es=sum(1 for h in history if h.source_language == "na"),
            es_na=sum(1 for h in history if h.source_language == "es"),
            sessions=client.llen(self._sessions_key()) or 1,
        )

    def statistics(self) -> Stats:
        stored = self.client.hgetall(self._stats_key())
        if not stored or b"total" not in stored:
            return self._recalculate()
        return Stats(
            total=int(stored.get(b"total", 0)),
            na_es=int(stored.get(b"na_es", 0)),
            es_na=int(stored.get(b"es_na", 0)),
            sessions=int(stored.get(b"sessions", 0)),
        )

    def clear(self) -> None:
        """Clear all stored data. Useful for tests."""
        for key in self.client.scan_iter(f"{self.prefix}:*"):
            self.client.delete(key)
