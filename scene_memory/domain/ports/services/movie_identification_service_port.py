from abc import ABC, abstractmethod
from typing import Optional

from scene_memory.domain.models.movie_candidate import IdentificationResult


class MovieIdentificationServicePort(ABC):
    """Port for identifying movies from scene descriptions"""

    @abstractmethod
    async def identify(self, description: Optional[str]) -> IdentificationResult:
        """Return ranked movie candidates for a free-text scene description"""
        pass
