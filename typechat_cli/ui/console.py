"""Console UI: colored diagnostics on stderr and JSON printing on stdout."""

import json
import re
import sys
from typing import Any, Optional, TextIO

from colorama import Fore, Style, just_fix_windows_console

just_fix_windows_console()

# Color shortcuts
C = Fore.CYAN
G = Fore.GREEN
Y = Fore.YELLOW
R = Fore.RED
M = Fore.MAGENTA
DIM = Style.DIM
BRIGHT = Style.BRIGHT
RESET = Style.RESET_ALL


def format_json(data: Any, indent: int = 2) -> str:
    return json.dumps(data, indent=indent, ensure_ascii=False)


def colorize_json(text: str) -> str:
    """Add syntax highlighting to pretty-printed JSON."""
    lines = []
    for line in text.split("\n"):
        highlighted = line
        highlighted = re.sub(r'(".*?"): ', rf"{C}\1{RESET}: ", highlighted)
        highlighted = re.sub(r': (".*?")([,]?)', rf": {G}\1{RESET}\2", highlighted)
        highlighted = re.sub(r": ([\d.]+)([,]?)", rf": {Y}\1{RESET}\2", highlighted)
        highlighted = re.sub(
            r": (true|false|null)([,]?)", rf": {M}\1{RESET}\2", highlighted
        )
        lines.append(highlighted)
    return "\n".join(lines)


def print_json(data: Any, stream: Optional[TextIO] = None) -> None:
    """
    Print data as indented JSON on stdout.

    Highlighting is applied only on a terminal so piped output stays parseable.
    """
    out = stream or sys.stdout
    text = format_json(data)
    if out.isatty():
        text = colorize_json(text)
    print(text, file=out)


def _err(text: str) -> None:
    print(text, file=sys.stderr)


class ConsoleUI:
    """Diagnostic output helpers; everything goes to stderr."""

    @staticmethod
    def banner(version: str) -> None:
        """Display startup banner."""
        _err(f"{BRIGHT}{C}typechat-cli v{version}{RESET}")

    @staticmethod
    def block(text: str) -> None:
        """Render multi-line text with a subtle prefix for readability."""
        content = (text or "").rstrip("\n")
        if not content.strip():
            _err(f"{DIM}│ (empty){RESET}")
            return
        for line in content.splitlines():
            _err(f"{DIM}│ {RESET}{line}")

    @staticmethod
    def success(msg: str) -> None:
        _err(f"{G}{BRIGHT}[OK]{RESET} {msg}")

    @staticmethod
    def error(msg: str) -> None:
        _err(f"{R}{BRIGHT}Error{RESET} {msg}")

    @staticmethod
    def info(msg: str, dim: bool = False) -> None:
        style = DIM if dim else ""
        _err(f"{style}{msg}{RESET}")

    @staticmethod
    def dim(msg: str) -> None:
        _err(f"{DIM}{msg}{RESET}")
