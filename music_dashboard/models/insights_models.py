from pydantic import BaseModel
from typing import Optional


class WebSearchResult(BaseModel):
    title: Optional[str] = None
    link: Optional[str] = None
    snippet: Optional[str] = None


class GifResponse(BaseModel):
    url: Optional[str] = None
