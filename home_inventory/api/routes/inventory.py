from typing import Optional

from fastapi import APIRouter, Depends, Query

from home_inventory.api.dependencies import get_session
from home_inventory.api.serializers import item_payload, taxonomy_payload
from home_inventory.session import InventorySession
from home_inventory.utilities.validators import ItemInput, QuantityInput, RenameInput

router = APIRouter(prefix="/api/inventory", tags=["inventory"])


@router.get("")
def list_items(category: Optional[str] = Query(default=None),
               subcategory: Optional[str] = Query(default=None),
               session: InventorySession = Depends(get_session)):
    """List inventory items, optionally narrowed to one category or subcategory."""
    if subcategory:
        items = session.inventory.items_for_subcategory(subcategory)
    elif category:
        items = session.inventory.items_for_category(category)
    else:
        items = session.inventory.items()
    return {"items": [item_payload(i) for i in items], "count": len(items)}


@router.get("/taxonomy")
def taxonomy():
    return {"categories": taxonomy_payload()}


@router.get("/{item_id}")
def get_item(item_id: str, session: InventorySession = Depends(get_session)):
    return item_payload(session.inventory.get_item(item_id))


@router.post("", status_code=201)
def add_item(payload: ItemInput, session: InventorySession = Depends(get_session)):
    return item_payload(session.inventory.add_custom_item(payload.name, payload.subcategory))


@router.put("/{item_id}/quantity")
def update_quantity(item_id: str, payload: QuantityInput, session: InventorySession = Depends(get_session)):
    return item_payload(session.inventory.update_quantity(item_id, payload.quantity))


@router.put("/{item_id}/name")
def rename_item(item_id: str, payload: RenameInput, session: InventorySession = Depends(get_session)):
    return item_payload(session.inventory.rename_item(item_id, payload.name))


@router.post("/{item_id}/restock")
def restock_item(item_id: str, session: InventorySession = Depends(get_session)):
    return item_payload(session.inventory.restock_item(item_id))


@router.delete("/{item_id}")
def delete_item(item_id: str, session: InventorySession = Depends(get_session)):
    removed = session.inventory.remove_item(item_id)
    return {"success": True, "id": removed.id}


@router.post("/reset")
def reset_to_defaults(session: InventorySession = Depends(get_session)):
    items = session.inventory.reset_to_defaults()
    return {"success": True, "count": len(items)}


@router.post("/clear")
def clear_all_data(session: InventorySession = Depends(get_session)):
    session.inventory.clear_all_data()
    return {"success": True}
