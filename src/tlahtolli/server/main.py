"""
Tlahtolli API Server.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.routing import APIRoute

from tlahtolli.config import settings
from tlahtolli.server.deps import get_lexicon, get_reference
from tlahtolli.server.routes import translate, dictionary, history

logger = logging.getLogger(__name__)


def api_routes(app: FastAPI) -> list[tuple[str, str, str]]:
    """(path, methods, endpoint name) for every API route, sorted by path."""
    routes = []
    for route in app.routes:
        if isinstance(route, APIRoute):
            methods = ",".join(sorted(route.methods - {"HEAD", "OPTIONS"}))
            routes.append((route.path, methods, route.name))
    return sorted(routes)


def log_routes(app: FastAPI) -> None:
    for path, methods, name in api_routes(app):
        logger.info("route %-7s %-36s %s", methods, path, name)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logging.basicConfig(level=settings.log_level)

    # build the dictionaries before serving any request
    lexicon = get_lexicon()
    reference = get_reference()
    logger.info(
        "Loaded %d nahuatl / %d spanish entries, %d word details",
        len(lexicon.index("na")),
        len(lexicon.index("es")),
        len(reference),
    )

    log_routes(app)
    yield


app = FastAPI(title=settings.app_name, lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(translate.router)
app.include_router(dictionary.router)
app.include_router(history.router)


@app.get("/")
async def root():
    return {"name": "Tlahtolli API", "version": "0.1.0"}
