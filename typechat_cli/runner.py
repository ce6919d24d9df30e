"""Schema translator: drives TypeChat over a sequence of inputs."""

from typing import Any, Dict, Iterable, List, Optional

from typechat import Failure, TypeChatJsonTranslator, TypeChatValidator

from typechat_cli.model import ClientLanguageModel
from typechat_cli.schema import to_jsonable
from typechat_cli.ui.console import ConsoleUI
from typechat_cli.utils import TextPrompt


class TranslationError(RuntimeError):
    """The translator could not produce a value matching the schema."""


class SchemaTranslator:
    """Translates text into JSON matching a schema type, one input at a time."""

    def __init__(
        self,
        language_model: ClientLanguageModel,
        target_type: type,
        attempt_repair: bool = True,
    ):
        self.target_type = target_type
        self.validator = TypeChatValidator(target_type)
        self.translator = TypeChatJsonTranslator(
            language_model, self.validator, target_type
        )
        # One repair round-trip when enabled, none otherwise.
        self.translator._max_repair_attempts = 1 if attempt_repair else 0

    async def translate(self, text: str) -> Any:
        """
        Translate one input.

        Returns:
            The validated result as plain JSON data

        Raises:
            TranslationError: With the translator's failure message
        """
        result = await self.translator.translate(text)
        if isinstance(result, Failure):
            raise TranslationError(result.message)
        return to_jsonable(self.target_type, result.value)

    async def translate_all(
        self,
        prompts: Iterable[TextPrompt],
        with_file: bool = False,
        verbose: bool = False,
    ) -> List[Any]:
        """
        Translate inputs sequentially, preserving input order.

        With with_file, each result is wrapped as {"filename", "input", "data"}.
        Stops at the first failure.
        """
        results: List[Any] = []
        for prompt in prompts:
            data = await self.translate(prompt.text)
            if verbose:
                ConsoleUI.dim(f"Using prompt: {prompt.text}")
            results.append(wrap_result(prompt, data) if with_file else data)
        return results


def wrap_result(prompt: TextPrompt, data: Any) -> Dict[str, Optional[Any]]:
    return {"filename": prompt.filename, "input": prompt.text, "data": data}
