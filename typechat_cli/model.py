"""TypeChat language-model adapter over the chat clients."""

import asyncio
from typing import Any, Dict, List, Sequence, Union

from typechat import Failure, Success

from typechat_cli.factory import LLMClient


def to_messages(prompt: Union[str, Sequence[Dict[str, Any]]]) -> List[Dict[str, str]]:
    """Normalize a TypeChat prompt (plain string or prompt sections) into chat messages."""
    if isinstance(prompt, str):
        return [{"role": "user", "content": prompt}]
    return [{"role": s["role"], "content": s["content"]} for s in prompt]


class ClientLanguageModel:
    """
    Implements TypeChat's TypeChatLanguageModel protocol.

    Client errors are returned as Failure so the translator reports them the
    same way as a validation failure.
    """

    def __init__(self, client: LLMClient):
        self.client = client

    async def complete(
        self, prompt: Union[str, Sequence[Dict[str, Any]]]
    ) -> Union[Success[str], Failure]:
        messages = to_messages(prompt)
        try:
            text = await asyncio.to_thread(self.client.complete, messages)
        except RuntimeError as e:
            return Failure(str(e))
        return Success(text)
