from typing import Optional

from pydantic import BaseModel, ConfigDict


class ExternalSearchResult(BaseModel):
    """Raw record returned by the movie search API"""

    model_config = ConfigDict(extra="ignore")

    id: Optional[int] = None
    title: Optional[str] = None
    release_date: Optional[str] = None
    overview: Optional[str] = None
    poster_path: Optional[str] = None
