from typing import List, Optional

from pydantic import BaseModel, Field


class IdentifyMovieRequest(BaseModel):
    """Request schema for movie identification"""

    description: Optional[str] = None


class MovieCandidateResponse(BaseModel):
    """Response schema for a single movie guess"""

    title: str
    year: str
    description: str
    poster_path: Optional[str] = None
    confidence: str


class IdentifyMovieResponse(BaseModel):
    """Response schema for identification results"""

    movies: List[MovieCandidateResponse]


class IdentifyMovieErrorResponse(BaseModel):
    """Response schema for failed identifications"""

    error: str
    movies: List[MovieCandidateResponse] = Field(default_factory=list)
