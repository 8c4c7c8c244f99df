"""
Dictionary routes: /api/words, /api/dictionary
"""

from fastapi import APIRouter, HTTPException

from tlahtolli.server.deps import get_reference


router = APIRouter(prefix="/api", tags=["dictionary"])


@router.get("/words/{word}")
async def get_word(word: str):
    """Definition, etymology and examples for a single word."""
    detail = get_reference().lookup(word)
    if detail is None:
        raise HTTPException(status_code=404, detail="Word not found")
    return detail.to_dict()


@router.get("/dictionary/search")
async def search_dictionary(q: str = ""):
    """Substring search over headwords, meanings and synonyms."""
    results = get_reference().search(q)
    return {"results": [d.to_dict() for d in results]}
