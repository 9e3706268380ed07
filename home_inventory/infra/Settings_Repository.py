"""Settings repository: a single AppSettings record."""
from home_inventory.domain.AppSettings import AppSettings


class SettingsRepository:
    def __init__(self, document: dict):
        self._document = document

    def get(self) -> AppSettings:
        '''Returns stored settings, or defaults when none were saved yet.'''
        return AppSettings.from_dict(self._document.get("settings") or {})

    def save(self, settings: AppSettings) -> AppSettings:
        self._document["settings"] = settings.to_dict()
        return settings
