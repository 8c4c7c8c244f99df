"""
Shared dependencies for routes.
"""

from functools import lru_cache

import redis
from fastapi import Depends

from tlahtolli.config import settings
from tlahtolli.core.history import HistoryStore
from tlahtolli.core.lexicon import Lexicon, build_lexicon
from tlahtolli.core.reference import LexicalReference, build_reference
from tlahtolli.core.translate import Translator


def get_redis() -> redis.Redis:
    return redis.Redis(host=settings.redis_host, port=settings.redis_port, db=settings.redis_db)


def get_history_store() -> HistoryStore:
    return HistoryStore(get_redis(), prefix=settings.key_prefix, limit=settings.history_limit)


@lru_cache
def get_lexicon() -> Lexicon:
    return build_lexicon()


@lru_cache
def get_reference() -> LexicalReference:
    return build_reference()


def get_translator(store: HistoryStore = Depends(get_history_store)) -> Translator:
    return Translator(get_lexicon(), get_reference(), sink=store)
