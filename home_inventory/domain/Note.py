"""Note domain entity: short free-text note with creation/modification stamps."""
from datetime import datetime
from typing import Optional
from uuid import uuid4

from home_inventory.utilities.timestamps import format_timestamp, parse_timestamp


class Note:
    def __init__(self, title: str = "", content: str = "", created_date: Optional[datetime] = None,
                 last_modified: Optional[datetime] = None, id: Optional[str] = None):
        now = datetime.now()
        self.id = id or str(uuid4())
        self.title = title
        self.content = content
        self.created_date = created_date or now
        self.last_modified = last_modified or self.created_date

    def update_content(self, new_title: str, new_content: str, now: Optional[datetime] = None):
        self.title = new_title
        self.content = new_content
        self.last_modified = now or datetime.now()
        return self

    def __str__(self) -> str:
        return f"{self.title or 'Untitled'} ({len(self.content)} chars)"

    __repr__ = __str__

    @staticmethod
    def from_dict(data):
        d = dict(data) if isinstance(data, dict) else {}
        created = parse_timestamp(d.get("created_date"))
        return Note(
            id=d.get("id"),
            title=d.get("title", ""),
            content=d.get("content", ""),
            created_date=created,
            last_modified=parse_timestamp(d.get("last_modified"), default=created),
        )

    def to_dict(self):
        return {
            "id": self.id,
            "title": self.title,
            "content": self.content,
            "created_date": format_timestamp(self.created_date),
            "last_modified": format_timestamp(self.last_modified),
        }
