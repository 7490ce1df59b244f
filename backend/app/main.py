import asyncio
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager, suppress

from fastapi import FastAPI

from app.models import HealthResponse
from routes.interactions import router as interactions_router
from services.store import SessionStore, session_store

logger = logging.getLogger(__name__)

PURGE_INTERVAL_SECONDS = 60.0


async def purge_expired_sessions(store: SessionStore, interval: float = PURGE_INTERVAL_SECONDS) -> None:
    while True:
        await asyncio.sleep(interval)
        store.purge_expired()


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
    # Fails startup on a bad RPS_CATALOG instead of on the first challenge.
    catalog = session_store.catalog
    logger.info("[app] Catalog options: %s", catalog.values())
    purge_task = None
    if session_store.ttl_seconds is not None:
        logger.info("[app] Session TTL %.0fs; purging every %.0fs", session_store.ttl_seconds, PURGE_INTERVAL_SECONDS)
        purge_task = asyncio.create_task(purge_expired_sessions(session_store, PURGE_INTERVAL_SECONDS))
    try:
        yield
    finally:
        if purge_task is not None:
            purge_task.cancel()
            with suppress(asyncio.CancelledError):
                await purge_task


app = FastAPI(title="RPS Challenge API", version="0.1.0", lifespan=lifespan)
app.include_router(interactions_router)


@app.get("/health", response_model=HealthResponse)
def health() -> HealthResponse:
    return HealthResponse(status="ok")
