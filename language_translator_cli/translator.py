"""
Language Translator command‑line interface.

This module provides a small command‑line front end to
:class:`~language_translator_lib.LanguageTranslatorClient`.  Each sub‑command
maps to one client method and prints the result as JSON.  The service URL and
credentials are taken from the ``LANGUAGE_TRANSLATOR_*`` environment variables
unless given on the command line.

---

# Quick ways to run the script

1. Translate text with a language pair

>>> language-translator translate --source en --target es "Hello" "Good morning"

2. Identify the language of a file

>>> language-translator identify examples/input.txt

3. Customise a model with a glossary

>>> language-translator create-model en-es --name my-model --forced-glossary glossary.tmx

4. List the default models translating into Spanish

>>> language-translator models --target es --default true
"""

import argparse
import json
import sys

from language_translator_lib import LanguageTranslatorClient, LanguageTranslatorError
from language_translator_lib.utils.logger import prepare_logger


# create-model file arguments opened by argparse
UPLOAD_ARGS = ("forced_glossary", "parallel_corpus", "monolingual_corpus")

def _str_to_bool(value: str) -> bool:
    if value.lower() in ("1", "true", "yes"):
        return True
    if value.lower() in ("0", "false", "no"):
        return False
    raise argparse.ArgumentTypeError(f"Expected a boolean, got {value!r}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Call the Language Translator service from the command line."
    )
    parser.add_argument("--url", default=None, help="Service URL.")
    parser.add_argument("--username", default=None, help="Basic auth username.")
    parser.add_argument("--password", default=None, help="Basic auth password.")
    parser.add_argument("--token", default=None, help="Bearer token.")
    parser.add_argument(
        "--timeout", type=int, default=None, help="Request timeout in seconds."
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="WARNING",
        help="Logging level (default: WARNING).",
    )

    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("translate", help="Translate text.")
    p.add_argument("text", nargs="+", help="Text fragments to translate.")
    p.add_argument("--model-id", default=None)
    p.add_argument("--source", default=None)
    p.add_argument("--target", default=None)

    p = sub.add_parser("identify", help="Identify the language of text.")
    p.add_argument(
        "input",
        nargs="?",
        type=argparse.FileType("r", encoding="utf-8"),
        default=sys.stdin,
        help="Input file (defaults to STDIN).",
    )

    sub.add_parser("languages", help="List identifiable languages.")

    p = sub.add_parser("models", help="List translation models.")
    p.add_argument("--source", default=None)
    p.add_argument("--target", default=None)
    p.add_argument("--default", dest="default_models", type=_str_to_bool, default=None)

    p = sub.add_parser("model", help="Show a single translation model.")
    p.add_argument("model_id")

    p = sub.add_parser("delete-model", help="Delete a custom translation model.")
    p.add_argument("model_id")

    p = sub.add_parser("create-model", help="Create a custom translation model.")
    p.add_argument("base_model_id")
    p.add_argument("--name", default=None)
    p.add_argument(
        "--forced-glossary", type=argparse.FileType("rb"), default=None
    )
    p.add_argument(
        "--parallel-corpus", type=argparse.FileType("rb"), default=None
    )
    p.add_argument(
        "--monolingual-corpus", type=argparse.FileType("rb"), default=None
    )
    return parser


def run_command(client: LanguageTranslatorClient, args: argparse.Namespace):
    if args.command == "translate":
        return client.translate(
            text=args.text,
            model_id=args.model_id,
            source=args.source,
            target=args.target,
        )
    if args.command == "identify":
        return client.identify(text=args.input.read())
    if args.command == "languages":
        return client.list_identifiable_languages()
    if args.command == "models":
        return client.list_models(
            source=args.source,
            target=args.target,
            default_models=args.default_models,
        )
    if args.command == "model":
        return client.get_model(model_id=args.model_id)
    if args.command == "delete-model":
        client.delete_model(model_id=args.model_id)
        return None
    if args.command == "create-model":
        return client.create_model(
            base_model_id=args.base_model_id,
            name=args.name,
            forced_glossary=args.forced_glossary,
            parallel_corpus=args.parallel_corpus,
            monolingual_corpus=args.monolingual_corpus,
        )
    raise ValueError(f"Unknown command {args.command}")


def _close_uploads(args: argparse.Namespace) -> None:
    for name in UPLOAD_ARGS:
        fh = getattr(args, name, None)
        if fh is not None:
            fh.close()


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logger = prepare_logger("language_translator", level=args.log_level)
    client = LanguageTranslatorClient.from_env(
        api=args.url,
        username=args.username,
        password=args.password,
        token=args.token,
        timeout=args.timeout,
        logger=logger,
    )

    try:
        result = run_command(client, args)
    except LanguageTranslatorError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    finally:
        _close_uploads(args)

    if result is not None:
        print(json.dumps(result.model_dump(), indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
