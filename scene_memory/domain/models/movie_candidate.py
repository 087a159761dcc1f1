from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


class Confidence(str, Enum):
    """Positional rank label shown next to each guess"""

    HIGH = "Alta"
    MEDIUM = "Média"
    LOW = "Baixa"


class MovieCandidate(BaseModel):
    """Domain model representing a movie guess for a scene description"""

    title: str
    year: str
    synopsis: str
    poster_path: Optional[str] = None
    confidence: Confidence


class IdentificationResult(BaseModel):
    """Domain model for identification results, most confident first"""

    movies: List[MovieCandidate] = Field(default_factory=list)
