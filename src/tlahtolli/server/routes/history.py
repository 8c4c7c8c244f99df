"""
History routes: /api/history, /api/saved, /api/sessions, /api/stats
"""

from fastapi import APIRouter, Depends, HTTPException, Request
from pydantic import BaseModel

from tlahtolli.core.history import HistoryStore
from tlahtolli.server.deps import get_history_store


router = APIRouter(prefix="/api", tags=["history"])


class SaveWordRequest(BaseModel):
    word: str
    translation: str
    source_language: str = "na"
    target_language: str = "es"
    session_id: str | None = None


class CreateSessionRequest(BaseModel):
    device_info: str = "unknown"


# === History ===

@router.get("/history")
async def list_history(limit: int = 1000, store: HistoryStore = Depends(get_history_store)):
    """Most recent translations first."""
    return {"history": [h.to_dict() for h in store.history(limit)]}


@router.delete("/history")
async def clear_history(store: HistoryStore = Depends(get_history_store)):
    store.clear_history()
    return {"success": True}


# === Saved words ===

@router.get("/saved")
async def list_saved(store: HistoryStore = Depends(get_history_store)):
    return {"saved": [h.to_dict() for h in store.custom_dictionary()]}


@router.post("/saved")
async def save_word(req: SaveWordRequest, store: HistoryStore = Depends(get_history_store)):
    added = store.add_custom(
        req.word,
        req.translation,
        req.source_language,
        req.target_language,
        req.session_id,
    )
    if not added:
        raise HTTPException(status_code=409, detail="Word already saved")
    return {"success": True}


@router.delete("/saved/{item_id}")
async def remove_saved(item_id: str, store: HistoryStore = Depends(get_history_store)):
    if not store.remove_custom(item_id):
        raise HTTPException(status_code=404, detail="Saved word not found")
    return {"success": True}


# === Sessions ===

@router.post("/sessions")
async def create_session(
    request: Request,
    req: CreateSessionRequest | None = None,
    store: HistoryStore = Depends(get_history_store),
):
    ip = request.client.host if request.client else "127.0.0.1"
    device_info = req.device_info if req else "unknown"
    session = store.create_session(device_info, ip)
    return session.to_dict()


@router.get("/sessions/{session_id}")
async def get_session(session_id: str, store: HistoryStore = Depends(get_history_store)):
    session = store.get_session(session_id)
    if not session:
        raise HTTPException(status_code=404, detail="Session not found")
    return session.to_dict()


@router.post("/sessions/{session_id}/end")
async def end_session(session_id: str, store: HistoryStore = Depends(get_history_store)):
    session = store.end_session(session_id)
    if not session:
        raise HTTPException(status_code=404, detail="Session not found")
    return session.to_dict()


# === Stats ===

@router.get("/stats")
async def get_stats(store: HistoryStore = Depends(get_history_store)):
    return store.statistics().to_dict()
