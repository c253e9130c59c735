"""
Completion service adapter

Submits role-tagged messages to a chat model and returns the generated text.
Every call is bounded by a timeout; transport, auth and timeout failures are
raised as adapter errors so the engine can abort the run.
"""

import asyncio
from typing import Sequence

from langchain_core.messages import BaseMessage

from .. import config
from ..errors import CompletionServiceError, CompletionTimeoutError
from ..utils.parsing import message_text


class CompletionService:
    """Thin async wrapper around a LangChain chat model"""

    def __init__(self, llm, timeout: float = None):
        """
        Args:
            llm: Any LangChain chat model (ChatOpenAI, ChatGroq, fakes in tests)
            timeout: Seconds to wait per call (default: COMPLETION_TIMEOUT_SECONDS)
        """
        self.llm = llm
        self.timeout = timeout if timeout is not None else config.COMPLETION_TIMEOUT_SECONDS

    @classmethod
    def from_env(cls) -> "CompletionService":
        from ..utils.llm_utils import get_llm
        return cls(get_llm())

    async def complete(self, messages: Sequence[BaseMessage]) -> str:
        """
        Run one completion.

        Args:
            messages: System/human messages, typically from ChatPromptTemplate.format_messages

        Returns:
            The generated text

        Raises:
            CompletionTimeoutError: no answer within the timeout
            CompletionServiceError: the model endpoint failed
        """
        try:
            response = await asyncio.wait_for(self.llm.ainvoke(list(messages)), timeout=self.timeout)
        except asyncio.TimeoutError as e:
            raise CompletionTimeoutError(f"Completion timed out after {self.timeout:g}s") from e
        except Exception as e:
            raise CompletionServiceError(f"Completion request failed: {e}") from e

        return message_text(response)
