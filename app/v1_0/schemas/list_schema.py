from typing import Literal, Optional
from pydantic import BaseModel, Field, field_validator

from app.core.settings import settings

RecordStatus = Literal["active", "deleted"]
LicenseFilter = Literal["all", "active", "inactive", "expiring"]


class ListParams(BaseModel):
    """Paging, search and sort input shared by every list view."""
    page: Optional[int] = Field(None, ge=1)
    size: int = Field(settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE)
    q: Optional[str] = Field(None, max_length=200)
    show_all: Optional[bool] = None
    sort: Optional[str] = Field(None, max_length=64)
    order: str = Field("ASC", pattern=r"(?i)^(asc|desc)$")

    @field_validator("q", "sort")
    @classmethod
    def _blank_to_none(cls, v: Optional[str]) -> Optional[str]:
        v = (v or "").strip()
        return v or None

    @property
    def effective_show_all(self) -> bool:
        # no page and no explicit flag: the whole list
        if self.show_all is None:
            return self.page is None
        return self.show_all

    @property
    def effective_page(self) -> int:
        return self.page or 1


class StatusFilters(BaseModel):
    status: RecordStatus = "active"


class TitleFilters(StatusFilters):
    type: Optional[str] = Field(None, max_length=50)
    origin_id: Optional[int] = Field(None, ge=1)
    genre_id: Optional[int] = Field(None, ge=1)


class LicenseFilters(StatusFilters):
    filter: LicenseFilter = "all"
