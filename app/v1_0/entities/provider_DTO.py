from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional
from .page import PageDTO

@dataclass(slots=True)
class ProviderRowDTO:
    provider_id: int
    name: str
    email: Optional[str]
    phone: Optional[str]
    is_deleted: bool
    license_count: int

ProviderPageDTO = PageDTO[ProviderRowDTO]

@dataclass(slots=True)
class ProviderLicenseDTO:
    license_id: int
    start_date: date
    end_date: date
    is_active: bool
    title_id: int
    title_name: str

@dataclass(slots=True)
class ProviderDetailDTO:
    provider_id: int
    name: str
    email: Optional[str]
    phone: Optional[str]
    address: Optional[str]
    is_deleted: bool
    licenses: List[ProviderLicenseDTO] = field(default_factory=list)
