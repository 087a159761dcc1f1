from abc import ABC, abstractmethod


class LLMPort(ABC):
    @abstractmethod
    async def chat(self, system: str, user: str) -> str:
        """Return the raw text of a single chat completion"""
        pass
