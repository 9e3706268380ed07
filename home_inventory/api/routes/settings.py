from fastapi import APIRouter, Depends

from home_inventory.api.dependencies import get_session
from home_inventory.domain.AppSettings import AppSettings
from home_inventory.session import InventorySession
from home_inventory.utilities.validators import ReminderTimesInput, SettingsInput

router = APIRouter(prefix="/api/settings", tags=["settings"])


@router.get("")
def get_settings(session: InventorySession = Depends(get_session)):
    return session.preferences.current().to_dict()


@router.put("")
def update_settings(payload: SettingsInput, session: InventorySession = Depends(get_session)):
    return session.preferences.update(AppSettings(**payload.model_dump())).to_dict()


@router.post("/dark-mode")
def toggle_dark_mode(session: InventorySession = Depends(get_session)):
    return session.preferences.toggle_dark_mode().to_dict()


@router.post("/security")
def toggle_security(session: InventorySession = Depends(get_session)):
    return session.preferences.toggle_security().to_dict()


@router.post("/inventory-reminder")
def toggle_inventory_reminder(session: InventorySession = Depends(get_session)):
    return session.preferences.toggle_inventory_reminder().to_dict()


@router.put("/reminders")
def update_reminder_times(payload: ReminderTimesInput, session: InventorySession = Depends(get_session)):
    return session.preferences.update_reminder_times(payload.time1, payload.time2).to_dict()
