from dataclasses import dataclass
from datetime import date
from typing import List, Optional

@dataclass(slots=True)
class DashboardStatsDTO:
    """Catalog-wide counters shown on the dashboard cards."""
    all_titles: int
    active_titles: int
    deleted_titles: int
    viewers: int
    providers: int
    genres: int
    total_views: int
    total_likes: int
    total_list_adds: int
    active_users: int
    new_titles: int
    expiring_licenses: int

@dataclass(slots=True)
class ViewsByDateDTO:
    date: date
    total_views: int

@dataclass(slots=True)
class InteractionsByDateDTO:
    date: date
    total_likes: int
    total_list_adds: int

@dataclass(slots=True)
class TitleViewsDTO:
    title_id: int
    name: str
    total_views: int

@dataclass(slots=True)
class GenreViewsDTO:
    genre_id: int
    name: str
    total_views: int

@dataclass(slots=True)
class TypeViewsDTO:
    type: Optional[str]
    total_views: int

@dataclass(slots=True)
class TypeCountDTO:
    type: Optional[str]
    count: int

@dataclass(slots=True)
class DashboardChartsDTO:
    views_by_date: List[ViewsByDateDTO]
    top_titles: List[TitleViewsDTO]
    top_genres: List[GenreViewsDTO]
    top_types: List[TypeViewsDTO]
    content_by_type: List[TypeCountDTO]

@dataclass(slots=True)
class AnalyticsDTO:
    views_over_time: List[ViewsByDateDTO]
    interactions_over_time: List[InteractionsByDateDTO]
    top_titles: List[TitleViewsDTO]
    top_genres: List[GenreViewsDTO]
    top_types: List[TypeViewsDTO]
