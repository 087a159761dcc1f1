from typing import Optional

from langchain_core.messages import HumanMessage, SystemMessage
from langchain_openai import ChatOpenAI

from scene_memory.domain.ports.services.llm import LLMPort
from scene_memory.infrastructure.config.settings import Settings


class LangChainOpenAILLM(LLMPort):
    def __init__(self, settings: Settings):
        self.settings = settings
        self._llm: Optional[ChatOpenAI] = None

    @property
    def llm(self) -> ChatOpenAI:
        if self._llm is None:
            self._llm = ChatOpenAI(
                model=self.settings.OPENAI_MODEL,
                api_key=self.settings.OPENAI_API_KEY,
                temperature=self.settings.OPENAI_TEMPERATURE,
            )
        return self._llm

    async def chat(self, system: str, user: str) -> str:
        msgs = [SystemMessage(content=system), HumanMessage(content=user)]
        resp = await self.llm.ainvoke(msgs)
        content = getattr(resp, "content", "") or ""
        if not isinstance(content, str):
            content = "".join(part if isinstance(part, str) else str(part.get("text", "")) for part in content)
        return content
