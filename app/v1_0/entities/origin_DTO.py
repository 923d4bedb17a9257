from dataclasses import dataclass
from .page import PageDTO

@dataclass(slots=True)
class OriginRowDTO:
    origin_id: int
    country: str
    language: str
    title_count: int

OriginPageDTO = PageDTO[OriginRowDTO]
