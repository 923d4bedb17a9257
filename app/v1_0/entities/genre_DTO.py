from dataclasses import dataclass
from .page import PageDTO

@dataclass(slots=True)
class GenreRowDTO:
    genre_id: int
    name: str
    title_count: int

GenrePageDTO = PageDTO[GenreRowDTO]
