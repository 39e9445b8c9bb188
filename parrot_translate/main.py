"""
CLI entry point for word lookup.

Usage:
    # Look up a word between the default preference languages (zh-CHS, en)
    parrot-translate good

    # Choose the preference languages and an explicit target
    parrot-translate bonjour --lang1 en --lang2 fr --target en

    # Only the primary line when there are no dictionary details
    parrot-translate "how are you" --compact

    # Automatic lookup: skipped if the same text was looked up within 5s
    parrot-translate good --auto --history-file ~/.parrot/history.json

    # Machine readable output
    parrot-translate good --json
"""

import argparse
import json
import logging
import sys

from parrot_translate.config import LookupConfig, RetryBackoff
from parrot_translate.history import QueryHistory
from parrot_translate.models import DisplaySection, LookupOutcome
from parrot_translate.translator.base import QueryCancelledError
from parrot_translate.translator.orchestrator import LookupSession
from parrot_translate.utils import setup_logging


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="parrot-translate",
        description=(
            "Look up a word or phrase with Youdao and merge in translations "
            "from Baidu, Tencent and Caiyun."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Environment variables for API keys:
  YOUDAO_APP_KEY, YOUDAO_APP_SECRET     - primary provider (required)
  BAIDU_APP_ID, BAIDU_APP_SECRET        - Baidu Translate
  TENCENT_SECRET_ID, TENCENT_SECRET_KEY - Tencent TMT
  CAIYUN_TOKEN                          - Caiyun Translate
        """,
    )

    parser.add_argument("text", nargs="+", help="Word or phrase to look up")

    # Languages
    parser.add_argument("--lang1", default="zh-CHS", help="First preference language (default: zh-CHS)")
    parser.add_argument("--lang2", default="en", help="Second preference language (default: en)")
    parser.add_argument("--target", default=None, help="Explicit target language")
    parser.add_argument("--from", dest="from_language", default=None, help="Explicit source language")

    # Output
    parser.add_argument("--compact", action="store_true", help="Show only the primary translation line")
    parser.add_argument("--json", action="store_true", help="Print sections as JSON")

    # Automatic lookups
    parser.add_argument(
        "--auto",
        action="store_true",
        help="Treat as an automatic lookup; skip if the text was seen within the window",
    )
    parser.add_argument("--history-file", default=None, help="Where to keep last-seen timestamps")

    # Timing and transport
    parser.add_argument("--delay-ms", type=int, default=400, help="Retry delay, 50-600 ms (default: 400)")
    parser.add_argument("--max-retries", type=int, default=3, help="Retries for transient errors (default: 3)")
    parser.add_argument(
        "--backoff",
        choices=[b.value for b in RetryBackoff],
        default=RetryBackoff.FIXED.value,
        help="Retry backoff (default: fixed)",
    )
    parser.add_argument("--timeout", type=float, default=10.0, help="HTTP timeout in seconds")
    parser.add_argument("--proxy", default=None, help="HTTP proxy URL")

    # Misc
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable verbose logging")

    return parser.parse_args(argv)


def section_to_dict(section: DisplaySection) -> dict:
    kind = getattr(section.kind, "value", section.kind)
    return {
        "kind": kind,
        "title": section.title,
        "items": [
            {
                "key": item.key,
                "title": item.title,
                "subtitle": item.subtitle,
                "tooltip": item.tooltip,
                "copy_text": item.copy_text,
                "phonetic": item.phonetic,
                "exam_types": item.exam_types,
            }
            for item in section.items
        ],
    }


def print_outcome(outcome: LookupOutcome, as_json: bool = False) -> None:
    if as_json:
        print(json.dumps([section_to_dict(s) for s in outcome.sections], ensure_ascii=False, indent=2))
        return

    for section in outcome.sections:
        if section.title:
            print()
            print(section.title)
            print("-" * 40)
        for item in section.items:
            line = item.title
            if item.subtitle:
                line = f"{line}  {item.subtitle}" if line else item.subtitle
            if item.phonetic:
                line = f"{line}  [{item.phonetic}]"
            if item.exam_types:
                line = f"{line}  ({' '.join(item.exam_types)})"
            print(f"  {line}")


def main(argv=None) -> int:
    args = parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)

    text = " ".join(args.text).strip()
    if not text:
        print("Type something to look up.", file=sys.stderr)
        return 1

    try:
        config = LookupConfig(
            language1=args.lang1,
            language2=args.lang2,
            delay_ms=args.delay_ms,
            max_retries=args.max_retries,
            retry_backoff=RetryBackoff(args.backoff),
            request_timeout=args.timeout,
            proxy=args.proxy,
        )
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if not config.has_primary_credentials():
        print(
            "Error: Youdao credentials are not configured.\n"
            "Set YOUDAO_APP_KEY and YOUDAO_APP_SECRET.",
            file=sys.stderr,
        )
        return 1

    history = None
    if args.auto or args.history_file:
        history = QueryHistory(args.history_file, window_ms=config.clipboard_query_window_ms)
        if args.auto and not history.should_auto_query(text):
            return 0
        history.record(text)

    session = LookupSession(config, compact=args.compact)
    try:
        outcome = session.lookup(
            text,
            target_language=args.target,
            from_language=args.from_language,
        )
    except QueryCancelledError:
        return 0
    finally:
        session.close()

    if not outcome.is_successful:
        print(outcome.error_title, file=sys.stderr)
        print(f"code: {outcome.error_code}", file=sys.stderr)
        print(f"Help: {outcome.help_url}", file=sys.stderr)
        return 1

    print_outcome(outcome, as_json=args.json)
    return 0


if __name__ == "__main__":
    sys.exit(main())
