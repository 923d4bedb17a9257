from dataclasses import dataclass
from datetime import date
from typing import Optional
from .page import PageDTO

@dataclass(slots=True)
class LicenseRowDTO:
    """License with its title and provider names; days_remaining counts to end_date."""
    license_id: int
    start_date: date
    end_date: date
    is_active: bool
    is_deleted: bool
    title_id: int
    title_name: str
    provider_id: int
    provider_name: str
    days_remaining: Optional[int]

LicensePageDTO = PageDTO[LicenseRowDTO]
