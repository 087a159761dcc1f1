from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


class SearchPlanSource(str, Enum):
    TITLES = "titles"
    KEYWORDS = "keywords"
    HEURISTIC = "heuristic"


class SearchPlan(BaseModel):
    """What to ask the movie search API for a single scene description"""

    source: SearchPlanSource
    titles: List[str] = Field(default_factory=list)
    keywords: Optional[str] = None
    year: Optional[str] = None

    @property
    def is_fan_out(self) -> bool:
        """One search per candidate title instead of a single keyword search"""
        return bool(self.titles)

    @property
    def queries(self) -> List[str]:
        if self.is_fan_out:
            return list(self.titles)
        return [self.keywords] if self.keywords else []
