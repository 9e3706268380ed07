from fastapi import APIRouter, Depends

from home_inventory.api.dependencies import get_session
from home_inventory.api.serializers import note_payload
from home_inventory.session import InventorySession
from home_inventory.utilities.validators import NoteInput

router = APIRouter(prefix="/api/notes", tags=["notes"])


@router.get("")
def list_notes(session: InventorySession = Depends(get_session)):
    notes = session.notes.notes()
    return {"notes": [note_payload(n) for n in notes], "count": len(notes),
            "can_add": session.notes.can_add_note()}


@router.get("/{note_id}")
def get_note(note_id: str, session: InventorySession = Depends(get_session)):
    return note_payload(session.notes.get_note(note_id))


@router.post("", status_code=201)
def add_note(payload: NoteInput, session: InventorySession = Depends(get_session)):
    return note_payload(session.notes.add_note(payload.title, payload.content))


@router.put("/{note_id}")
def update_note(note_id: str, payload: NoteInput, session: InventorySession = Depends(get_session)):
    return note_payload(session.notes.update_note(note_id, payload.title, payload.content))


@router.delete("/{note_id}")
def delete_note(note_id: str, session: InventorySession = Depends(get_session)):
    session.notes.delete_note(note_id)
    return {"success": True}
