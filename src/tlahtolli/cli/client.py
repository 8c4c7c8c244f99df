"""
HTTP client for the Tlahtolli API.
"""

import httpx

from tlahtolli.config import settings

BASE_URL = settings.api_base_url


# === Translation ===

def translate(text: str, direction: str = "auto", session_id: str | None = None) -> dict:
    payload = {"text": text, "direction": direction, "session_id": session_id}
    r = httpx.post(f"{BASE_URL}/translate", json=payload)
    r.raise_for_status()
    return r.json()


# === Dictionary ===

def get_word(word: str) -> dict | None:
    r = httpx.get(f"{BASE_URL}/words/{word}")
    if r.status_code == 404:
        return None
    r.raise_for_status()
    return r.json()


def search(query: str) -> list[dict]:
    r = httpx.get(f"{BASE_URL}/dictionary/search", params={"q": query})
    r.raise_for_status()
    return r.json()["results"]


# === History ===

def list_history(limit: int = 1000) -> list[dict]:
    r = httpx.get(f"{BASE_URL}/history", params={"limit": limit})
    r.raise_for_status()
    return r.json()["history"]


def clear_history() -> dict:
    r = httpx.delete(f"{BASE_URL}/history")
    r.raise_for_status()
    return r.json()


# === Saved words ===

def list_saved() -> list[dict]:
    r = httpx.get(f"{BASE_URL}/saved")
    r.raise_for_status()
    return r.json()["saved"]


def save_word(word: str, translation: str, source: str, target: str) -> dict:
    payload = {
        "word": word,
        "translation": translation,
        "source_language": source,
        "target_language": target,
    }
    r = httpx.post(f"{BASE_URL}/saved", json=payload)
    r.raise_for_status()
    return r.json()


def remove_saved(item_id: str) -> dict:
    r = httpx.delete(f"{BASE_URL}/saved/{item_id}")
    r.raise_for_status()
    return r.json()


# === Sessions / stats ===

def create_session(device_info: str) -> dict:
    r = httpx.post(f"{BASE_URL}/sessions", json={"device_info": device_info})
    r.raise_for_status()
    return r.json()


def get_stats() -> dict:
    r = httpx.get(f"{BASE_URL}/stats")
    r.raise_for_status()
    return r.json()
