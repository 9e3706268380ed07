from typing import Optional
import logging

from fastapi import FastAPI, Query, Request
from fastapi.responses import JSONResponse

from home_inventory.api.routes import insights, inventory, notes, settings, shopping
from home_inventory.errors import CapacityExceeded, ItemNotFound, StorageFailure, ValidationFailure
from home_inventory.events.observers import EventLog
from home_inventory.session import InventorySession
from home_inventory.utilities.config import EVENT_LOG_SIZE

# Logging
logger = logging.getLogger("home_inventory_app")

ERROR_STATUS = (
    (StorageFailure, 503),
    (ValidationFailure, 422),
    (ItemNotFound, 404),
    (CapacityExceeded, 409),
)


def _register_error_handlers(app: FastAPI):
    def make_handler(status_code: int):
        async def handler(request: Request, exc: Exception):
            logger.info(f"{request.method} {request.url.path} -> {status_code}: {exc}")
            return JSONResponse(status_code=status_code, content={"detail": str(exc)})
        return handler

    for exc_type, status_code in ERROR_STATUS:
        app.add_exception_handler(exc_type, make_handler(status_code))


def create_app(session: Optional[InventorySession] = None) -> FastAPI:
    """Build the API. Without a session the configured store file is opened on first request."""
    app = FastAPI(title="Home Inventory API")
    app.state.session = session
    app.state.event_log = EventLog(EVENT_LOG_SIZE)
    if session is not None:
        app.state.event_log.attach(session.events)

    for module in (inventory, shopping, insights, notes, settings):
        app.include_router(module.router)
    _register_error_handlers(app)

    @app.get('/api/events')
    def api_events(
        since: Optional[int] = Query(default=None, description="Return events with id greater than this value")
    ):
        """
        Return recent change events (inventory, shopping, settings, notes, errors).

        Client polling strategy:
            1. First call without 'since' to load the current backlog.
            2. Store 'next_cursor' from the response.
            3. Subsequent polls: /api/events?since=<next_cursor>
        """
        return app.state.event_log.get_events(since)

    return app


app = create_app()
