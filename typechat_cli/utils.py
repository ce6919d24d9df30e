"""Input acquisition helpers: positional arguments, files, and stdin."""

from pathlib import Path
from typing import List, NamedTuple, Optional, Sequence, TextIO

from typechat_cli.ui.console import ConsoleUI


class TextPrompt(NamedTuple):
    """One input to translate. filename is set when the text came from a file."""

    filename: Optional[str]
    text: str


def param_to_text_prompt(param: str) -> TextPrompt:
    """
    Resolve a positional argument into prompt text.

    If param names an existing file, read it and report its real path.
    Otherwise (no such file, a directory, or an unreadable file) use param as literal text.
    """
    path = Path(param)
    try:
        if path.is_file():
            return TextPrompt(str(path.resolve()), path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, ValueError):
        pass
    return TextPrompt(None, param)


def read_stream(stream: TextIO) -> str:
    """Read a text stream to EOF."""
    return stream.read()


def gather_inputs(params: Sequence[str], stdin: TextIO) -> List[TextPrompt]:
    """Map positional params to prompts; with none given, stdin is the single input."""
    if not params:
        ConsoleUI.info("No input provided, reading from stdin...", dim=True)
        return [TextPrompt(None, read_stream(stdin))]
    return [param_to_text_prompt(p) for p in params]
