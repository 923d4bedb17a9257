from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional, Union
from .page import PageDTO

@dataclass(slots=True)
class ViewerRowDTO:
    viewer_id: int
    username: str
    email: str
    created_date: Optional[Union[datetime, date]]

ViewerPageDTO = PageDTO[ViewerRowDTO]

ViewerDetailDTO = ViewerRowDTO
