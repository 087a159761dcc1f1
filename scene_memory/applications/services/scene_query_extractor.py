from scene_memory.domain.models.search_plan import SearchPlan
from scene_memory.domain.ports.services.llm import LLMPort
from scene_memory.domain.ports.services.logger import LoggerPort
from scene_memory.domain.services.query_extraction import heuristic_search_plan, parse_search_plan

SCENE_EXTRACTION_PROMPT = (
    "You are a movie expert who identifies films from half-remembered scene descriptions. "
    "Read the user's description and respond ONLY with a valid JSON object, without any other text. "
    "If you can think of movies that match the scene, respond with up to 3 candidate titles, most likely first, "
    "written in the same language as the description: {\"titles\": [\"title 1\", \"title 2\", \"title 3\"]}. "
    "If you cannot name any movie, respond with short search keywords for a movie database and, when the "
    "description suggests one, a release year: {\"keywords\": \"search keywords\", \"year\": \"YYYY\"}. "
    "Omit the year when it is unknown."
)


class SceneQueryExtractor:
    """Extracts a SearchPlan from a scene description with the language model.

    Never raises: any failure of the model call or its output falls back to a
    keyword plan built from the description itself.
    """

    def __init__(self, llm: LLMPort, logger: LoggerPort):
        self.llm = llm
        self.logger = logger

    async def extract(self, description: str) -> SearchPlan:
        try:
            raw = await self.llm.chat(SCENE_EXTRACTION_PROMPT, description)
            plan = parse_search_plan(raw)
        except Exception as e:
            self.logger.warning(f"Extraction failed, using heuristic query instead: {e.__class__.__name__}: {e}")
            plan = heuristic_search_plan(description)

        self.logger.info(f"Extraction result: source={plan.source.value} queries={plan.queries} year={plan.year}")
        return plan
