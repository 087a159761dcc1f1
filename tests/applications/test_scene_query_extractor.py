import pytest

from scene_memory.applications.services.scene_query_extractor import SCENE_EXTRACTION_PROMPT
from scene_memory.domain.models.search_plan import SearchPlanSource
from tests.factories import llm_reply

DESCRIPTION = "homem de terno preto lutando em prédio, anos 90"


class TestSceneQueryExtractor:
    @pytest.mark.asyncio
    async def test_extract_titles(self, query_extractor, mock_llm):
        """Test the model's title list becomes a fan-out plan"""
        mock_llm.chat.return_value = llm_reply({"titles": ["Duro de Matar", "Velocidade Máxima"]}, prose=True)

        plan = await query_extractor.extract(DESCRIPTION)

        assert plan.source == SearchPlanSource.TITLES
        assert plan.titles == ["Duro de Matar", "Velocidade Máxima"]
        mock_llm.chat.assert_awaited_once_with(SCENE_EXTRACTION_PROMPT, DESCRIPTION)

    @pytest.mark.asyncio
    async def test_extract_keywords(self, query_extractor, mock_llm):
        mock_llm.chat.return_value = llm_reply({"keywords": "terno preto prédio", "year": "1994"})

        plan = await query_extractor.extract(DESCRIPTION)

        assert plan.source == SearchPlanSource.KEYWORDS
        assert plan.keywords == "terno preto prédio"
        assert plan.year == "1994"

    @pytest.mark.asyncio
    async def test_model_failure_falls_back_to_heuristic(self, query_extractor, mock_llm, mock_logger):
        """Test a failing model call never escapes the extractor"""
        mock_llm.chat.side_effect = ConnectionError("provider unreachable")

        plan = await query_extractor.extract(DESCRIPTION)

        assert plan.source == SearchPlanSource.HEURISTIC
        assert plan.keywords == DESCRIPTION
        assert plan.year is None
        mock_logger.warning.assert_called_once()

    @pytest.mark.asyncio
    async def test_unparsable_reply_falls_back_to_heuristic(self, query_extractor, mock_llm):
        mock_llm.chat.return_value = "I think this might be Die Hard, but I'm not sure."

        plan = await query_extractor.extract("a b c d e f g h i j k l")

        assert plan.source == SearchPlanSource.HEURISTIC
        assert plan.keywords == "a b c d e f g h i j"

    @pytest.mark.asyncio
    async def test_empty_reply_falls_back_to_heuristic(self, query_extractor, mock_llm):
        mock_llm.chat.return_value = ""

        plan = await query_extractor.extract(DESCRIPTION)

        assert plan.source == SearchPlanSource.HEURISTIC
