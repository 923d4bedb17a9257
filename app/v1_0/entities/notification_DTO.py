from dataclasses import dataclass
from datetime import datetime
from typing import Literal

NotificationKind = Literal["license_expiring", "title_added"]

@dataclass(slots=True)
class NotificationDTO:
    """One entry of the header notification list; ``id`` is stable per source row."""
    id: str
    kind: NotificationKind
    title: str
    message: str
    time: datetime
