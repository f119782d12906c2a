#!/usr/bin/env python3
"""
Text Analytics CLI - Key phrases and sentiment from the command line.

Usage:
    python cli.py key-phrases "The food was delicious and the staff friendly"
    python cli.py sentiment "I had a wonderful trip" --language en
    python cli.py check-config
"""

import argparse
import asyncio
import json
import logging
import sys

from config import settings
from analyzer import TextAnalysisClient, TextAnalyticsError, TransportError


def print_status(message: str, is_error: bool = False) -> None:
    """Print status message to stderr so it doesn't interfere with JSON output."""
    prefix = "ERROR:" if is_error else ">"
    print(f"{prefix} {message}", file=sys.stderr)


async def extract_key_phrases(language: str, text: str) -> dict:
    """
    Run key phrase extraction for a single text.

    Returns:
        Dict with the language and the key phrases
    """
    async with TextAnalysisClient.from_settings() as client:
        phrases = await client.extract_key_phrases(language, text)
    return {"language": language, "key_phrases": phrases}


async def score_sentiment(language: str, text: str) -> dict:
    """Run sentiment scoring for a single text."""
    async with TextAnalysisClient.from_settings() as client:
        score = await client.get_sentiment(language, text)
    return {"language": language, "score": score}


def cmd_key_phrases(args) -> None:
    """Handle key-phrases command."""
    print_status(f"Extracting key phrases ({args.language})...")
    result = asyncio.run(extract_key_phrases(args.language, args.text))
    print(json.dumps(result, indent=2, ensure_ascii=False))


def cmd_sentiment(args) -> None:
    """Handle sentiment command."""
    print_status(f"Scoring sentiment ({args.language})...")
    result = asyncio.run(score_sentiment(args.language, args.text))
    print(json.dumps(result, indent=2))


def cmd_check_config(args) -> None:
    """Handle check-config command."""
    print(json.dumps({
        "api_key": "configured" if settings.has_api_key() else "missing",
        "endpoint": settings.text_analytics_endpoint,
        "log_level": settings.log_level,
        "missing": settings.validate()
    }, indent=2))


def check_config() -> bool:
    """Check configuration and print warnings."""
    missing = settings.validate()

    if missing:
        print_status(f"Missing required config: {', '.join(missing)}", is_error=True)
        print_status("Set them in the environment or in a .env file", is_error=True)
        return False

    return True


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Text Analytics CLI - key phrases and sentiment scoring",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python cli.py key-phrases "The hotel was clean and the breakfast great"
  python cli.py sentiment "Das Essen war schrecklich" --language de
  python cli.py check-config

Output is JSON format, suitable for piping to other tools:
  python cli.py sentiment "Great service" | jq '.score'
        """
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Key phrases command
    key_phrases_parser = subparsers.add_parser(
        "key-phrases",
        help="Extract the key phrases of a text"
    )
    key_phrases_parser.add_argument("text", help="Text to analyze")
    key_phrases_parser.add_argument(
        "--language", "-l",
        default="en",
        help="Language code of the text (default: en)"
    )
    key_phrases_parser.set_defaults(func=cmd_key_phrases)

    # Sentiment command
    sentiment_parser = subparsers.add_parser(
        "sentiment",
        help="Score the sentiment of a text from 0 (negative) to 1 (positive)"
    )
    sentiment_parser.add_argument("text", help="Text to analyze")
    sentiment_parser.add_argument(
        "--language", "-l",
        default="en",
        help="Language code of the text (default: en)"
    )
    sentiment_parser.set_defaults(func=cmd_sentiment)

    # Config check command
    check_parser = subparsers.add_parser(
        "check-config",
        help="Show the current configuration"
    )
    check_parser.set_defaults(func=cmd_check_config)

    return parser


def main(argv=None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr
    )

    if args.command in ["key-phrases", "sentiment"]:
        if not check_config():
            return 1

    try:
        args.func(args)
    except KeyboardInterrupt:
        print_status("Operation cancelled by user")
        return 130
    except (TextAnalyticsError, TransportError) as e:
        print_status(f"Error: {e}", is_error=True)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
