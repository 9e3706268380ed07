"""Request dependencies shared by the API routers."""
import logging
from threading import Lock

from fastapi import Request

from home_inventory.session import InventorySession, open_session
from home_inventory.infra.paths import STORE_FILE, ensure_data_dir

logger = logging.getLogger(__name__)

_open_lock = Lock()


def get_session(request: Request) -> InventorySession:
    """Return the app's session, opening the configured store on first use."""
    state = request.app.state
    with _open_lock:
        if getattr(state, "session", None) is None:
            logger.info(f"Opening inventory store {STORE_FILE}")
            ensure_data_dir(STORE_FILE.parent)
            state.session = open_session(STORE_FILE)
            state.event_log.attach(state.session.events)
    return state.session
