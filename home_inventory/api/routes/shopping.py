from fastapi import APIRouter, Depends

from home_inventory.api.dependencies import get_session
from home_inventory.api.serializers import shopping_payload
from home_inventory.session import InventorySession
from home_inventory.utilities.validators import MiscItemInput, ShoppingEntryInput

router = APIRouter(prefix="/api/shopping", tags=["shopping"])


def _result(session: InventorySession, success: bool):
    return {"success": bool(success), "state": session.shopping_state.value}


@router.get("")
def shopping_list(session: InventorySession = Depends(get_session)):
    items = session.shopping_items()
    return {
        "state": session.shopping_state.value,
        "items": [shopping_payload(i) for i in items],
        "count": len(items),
        "checked": sum(1 for i in items if i.is_checked),
    }


@router.get("/suggestions")
def misc_suggestions(session: InventorySession = Depends(get_session)):
    return {"suggestions": session.preferences.misc_item_suggestions()}


@router.post("/generate")
def generate(session: InventorySession = Depends(get_session)):
    return _result(session, session.shopping.generate())


@router.post("/finalize")
def finalize(session: InventorySession = Depends(get_session)):
    return _result(session, session.shopping.finalize())


@router.post("/cancel")
def cancel(session: InventorySession = Depends(get_session)):
    return _result(session, session.shopping.cancel())


@router.post("/start")
def start_shopping(session: InventorySession = Depends(get_session)):
    return _result(session, session.shopping.start_shopping())


@router.post("/complete")
def complete(session: InventorySession = Depends(get_session)):
    return _result(session, session.shopping.complete_and_restore())


@router.post("/misc")
def add_misc_item(payload: MiscItemInput, session: InventorySession = Depends(get_session)):
    entry = session.shopping.add_misc_item(payload.name)
    result = _result(session, entry is not None)
    result["item"] = shopping_payload(entry) if entry else None
    return result


@router.post("/items")
def add_inventory_item(payload: ShoppingEntryInput, session: InventorySession = Depends(get_session)):
    entry = session.shopping.add_inventory_item(payload.inventory_item_id)
    result = _result(session, entry is not None)
    result["item"] = shopping_payload(entry) if entry else None
    return result


@router.delete("/items/{entry_id}")
def remove_item(entry_id: str, session: InventorySession = Depends(get_session)):
    return _result(session, session.shopping.remove_shopping_item(entry_id))


@router.post("/items/{entry_id}/toggle")
def toggle_item(entry_id: str, session: InventorySession = Depends(get_session)):
    entry = session.shopping.toggle_checked(entry_id)
    result = _result(session, entry is not None)
    result["item"] = shopping_payload(entry) if entry else None
    return result
