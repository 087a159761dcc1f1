from abc import ABC, abstractmethod
from typing import List, Optional

from scene_memory.domain.models.external_search_result import ExternalSearchResult


class MovieSearchRepository(ABC):
    @abstractmethod
    async def search(self, query: str, year: Optional[str] = None) -> List[ExternalSearchResult]:
        """Search movies by free text, in relevance order.

        Raises UpstreamSearchError when the search API cannot be reached or
        answers with an error. An empty list is a successful search.
        """
        pass
