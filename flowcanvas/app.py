"""FastAPI entry point for flowcanvas."""

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from flowcanvas import __version__
from flowcanvas.api.nodes import get_registry, router as nodes_router

_log_level = os.environ.get("FLOWCANVAS_LOG_LEVEL")
if _log_level:
    logging.basicConfig(
        level=_log_level.upper(),
        format="%(asctime)s [%(name)s] [%(levelname)s] %(message)s",
    )


def _cors_origins() -> list[str]:
    raw = os.environ.get("FLOWCANVAS_CORS_ORIGINS", "http://localhost:5173")
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Discover node kinds up front so the first palette request is not slowed down.
    get_registry()
    yield


app = FastAPI(title="flowcanvas", version=__version__, lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


app.include_router(nodes_router)


@app.get("/api/health")
async def health():
    return {"status": "ok", "version": __version__}


def main():
    import uvicorn

    host = os.environ.get("FLOWCANVAS_HOST", "0.0.0.0")
    port = int(os.environ.get("FLOWCANVAS_PORT", "8000"))
    uvicorn.run("flowcanvas.app:app", host=host, port=port)


if __name__ == "__main__":
    main()
