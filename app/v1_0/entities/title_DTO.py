from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional
from .page import PageDTO

@dataclass(slots=True)
class TitleRowDTO:
    """Row of the titles list, joined with its origin and genre names."""
    title_id: int
    name: str
    type: str
    original_release_date: Optional[date]
    is_original: bool
    season_count: Optional[int]
    episode_count: Optional[int]
    is_deleted: bool
    country: str
    language: str
    origin_id: int
    genres: List[str] = field(default_factory=list)

@dataclass(slots=True)
class OriginOptionDTO:
    origin_id: int
    country: str
    language: str

@dataclass(slots=True)
class GenreOptionDTO:
    genre_id: int
    name: str

@dataclass(slots=True)
class TitleFilterOptionsDTO:
    """Choices offered by the titles list filters."""
    types: List[str]
    origins: List[OriginOptionDTO]
    genres: List[GenreOptionDTO]

TitlePageDTO = PageDTO[TitleRowDTO]

@dataclass(slots=True)
class TitleLicenseDTO:
    license_id: int
    start_date: date
    end_date: date
    is_active: bool
    provider_id: int
    provider_name: str

@dataclass(slots=True)
class TitleViewStatDTO:
    date: date
    views: int

@dataclass(slots=True)
class TitleInteractionStatDTO:
    date: date
    likes: int
    list_adds: int

@dataclass(slots=True)
class TitleDetailDTO:
    """A title with its origin, genres, licenses and its first 30 days of stats."""
    title_id: int
    name: str
    type: str
    original_release_date: Optional[date]
    is_original: bool
    season_count: Optional[int]
    episode_count: Optional[int]
    is_deleted: bool
    country: str
    language: str
    origin_id: int
    genres: List[GenreOptionDTO] = field(default_factory=list)
    licenses: List[TitleLicenseDTO] = field(default_factory=list)
    view_stats: List[TitleViewStatDTO] = field(default_factory=list)
    interaction_stats: List[TitleInteractionStatDTO] = field(default_factory=list)

@dataclass(slots=True)
class TitleHistoryEventDTO:
    date: date
    action: str
    details: str

@dataclass(slots=True)
class TitleHistoryDTO:
    title_id: int
    name: str
    is_deleted: bool
    events: List[TitleHistoryEventDTO]
