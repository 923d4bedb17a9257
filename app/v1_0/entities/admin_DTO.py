from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional, Union
from .page import PageDTO

@dataclass(slots=True)
class AdminRowDTO:
    """Dashboard operator account."""
    admin_id: int
    username: str
    email: str
    role: str
    created_date: Optional[Union[datetime, date]]
    is_deleted: bool

AdminPageDTO = PageDTO[AdminRowDTO]
