"""
Translation routes: /api/translate
"""

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from tlahtolli.core.translate import Direction, Translator
from tlahtolli.server.deps import get_translator


router = APIRouter(prefix="/api", tags=["translate"])


class TranslateRequest(BaseModel):
    text: str
    direction: Direction = Direction.AUTO
    session_id: str | None = None


@router.post("/translate")
async def translate(req: TranslateRequest, translator: Translator = Depends(get_translator)):
    """Translate a phrase. History is recorded best-effort."""
    result = translator.translate(req.text, req.direction, session_id=req.session_id)
    return result.to_dict()
