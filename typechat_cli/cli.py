"""Command-line interface for typechat-cli."""

import argparse
import asyncio
import os
import sys
import traceback
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

from typechat_cli import __version__
from typechat_cli.constants import DEFAULT_TYPE_NAME
from typechat_cli.factory import create_client
from typechat_cli.model import ClientLanguageModel
from typechat_cli.runner import SchemaTranslator, TranslationError
from typechat_cli.schema import load_schema_type
from typechat_cli.ui.console import ConsoleUI, format_json, print_json
from typechat_cli.utils import gather_inputs

TRANSLATION_FAILED = -1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="typechat-cli",
        description="Translate text into JSON matching a schema type, using a language model",
        usage="typechat-cli -s [schema] [input 1] [input 2] ... - inputs can be raw text or a filename",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  typechat-cli -s sentiment_schema.py "I love geese"
  typechat-cli -s links_schema.py --with-file notes.md bookmarks.txt
  cat review.txt | typechat-cli -s sentiment_schema.py -m gpt-4o

Backend (environment or .env):
  OPENAI_API_KEY [OPENAI_MODEL, OPENAI_ENDPOINT, OPENAI_ORGANIZATION]
  OLLAMA_ENDPOINT [OLLAMA_MODEL]
  AZURE_OPENAI_API_KEY + AZURE_OPENAI_ENDPOINT
        """,
    )
    parser.add_argument(
        "inputs",
        nargs="*",
        metavar="INPUT",
        help="Raw text or a filename; reads stdin when omitted",
    )
    parser.add_argument(
        "-s",
        "--schema",
        required=True,
        help="The filename of the Python schema (TypedDict or dataclass definitions) to match to",
    )
    parser.add_argument(
        "-t",
        "--type",
        default=DEFAULT_TYPE_NAME,
        help=f'The type to use inside the schema file. Defaults to "{DEFAULT_TYPE_NAME}"',
    )
    parser.add_argument(
        "-m",
        "--model",
        default=None,
        help="The model to use. Defaults to gpt-4 (or llama2 on Ollama); "
        "Azure uses the deployment named in AZURE_OPENAI_ENDPOINT",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Print verbose output (on stderr)",
    )
    parser.add_argument(
        "--with-file",
        action="store_true",
        help="Wrap each result in an object that gives the filename and original input text",
    )
    parser.add_argument(
        "--no-repair",
        dest="attempt_repair",
        action="store_false",
        help="Do not ask the model to repair a response that fails validation",
    )
    parser.add_argument("-o", "--output", help="Also write the JSON output to this file")
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    return parser


def translate(args: argparse.Namespace) -> int:
    """Run the pipeline for parsed arguments. Returns the process exit code."""
    client = create_client(os.environ, args.model)
    target_type = load_schema_type(args.schema, args.type)
    translator = SchemaTranslator(
        ClientLanguageModel(client),
        target_type,
        attempt_repair=args.attempt_repair,
    )
    if args.verbose:
        ConsoleUI.banner(__version__)
        ConsoleUI.dim(f"Backend: {client.describe()}")
        ConsoleUI.dim(f"Schema: {Path(args.schema).resolve()} · type {args.type}")

    prompts = gather_inputs(args.inputs, sys.stdin)
    try:
        results = asyncio.run(
            translator.translate_all(
                prompts, with_file=args.with_file, verbose=args.verbose
            )
        )
    except TranslationError as e:
        ConsoleUI.error(str(e))
        return TRANSLATION_FAILED

    output = results[0] if len(results) == 1 else results
    print_json(output)
    if args.output:
        Path(args.output).write_text(format_json(output) + "\n", encoding="utf-8")
        if args.verbose:
            ConsoleUI.success(f"Saved to: {Path(args.output).absolute()}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    load_dotenv(Path.cwd() / ".env")
    args = build_parser().parse_args(argv)
    try:
        return translate(args)
    except KeyboardInterrupt:
        ConsoleUI.info("Interrupted")
        return 1
    except Exception as e:
        ConsoleUI.error(f"{type(e).__name__}: {e}")
        if args.verbose:
            ConsoleUI.block(traceback.format_exc())
        return 1


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
