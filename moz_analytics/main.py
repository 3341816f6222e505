"""Command-line entry point for the Moz analytics tools.

Runs one Moz tool and prints its JSON result to stdout. Logs go to stderr.

Example:
    ```bash
    python -m moz_analytics.main --list
    python -m moz_analytics.main moz_site_metrics --args '{"site": "moz.com"}'
    python -m moz_analytics.main moz_competitor_analysis \\
        --args '{"primary_site": "example.com", "target_keyword": "seo tools",
                 "competitor_sites": ["moz.com", "ahrefs.com"]}'
    ```
"""

import argparse
import asyncio
import json
import logging
import sys
from typing import Any

from pydantic import ValidationError

from moz_analytics.config import get_config
from moz_analytics.exceptions.base import MozAnalyticsError
from moz_analytics.exceptions.tool_error import InvalidArgumentError, UnknownToolError
from moz_analytics.tools.moz_tools import TOOLS, invoke_tool

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def parse_arguments(raw: str | None) -> dict[str, Any]:
    """Decode the ``--args`` JSON object.

    Raises:
        InvalidArgumentError: If the value is not a JSON object
    """
    if not raw:
        return {}
    try:
        arguments = json.loads(raw)
    except json.JSONDecodeError as e:
        raise InvalidArgumentError(f"--args is not valid JSON: {e}") from e
    if not isinstance(arguments, dict):
        raise InvalidArgumentError("--args must be a JSON object")
    return arguments


def list_tools() -> str:
    lines = []
    for name, selected in TOOLS.items():
        summary = selected.description.strip().splitlines()[0]
        lines.append(f"{name:<34} {summary}")
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    """Main entry point for command-line usage.

    Returns:
        Exit code (0 for success, 1 for failure, 2 for invalid arguments)
    """
    parser = argparse.ArgumentParser(
        description="Query the Moz API through its JSON-RPC tools",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m moz_analytics.main moz_quota
  python -m moz_analytics.main moz_keyword_volume --args '{"keyword": "seo tools"}'
        """,
    )

    parser.add_argument(
        "tool",
        nargs="?",
        help="Tool name (see --list)",
    )

    parser.add_argument(
        "--args",
        dest="arguments",
        default=None,
        help="Tool arguments as a JSON object",
    )

    parser.add_argument(
        "--list",
        action="store_true",
        help="List available tools and exit",
    )

    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging (DEBUG level)",
    )

    args = parser.parse_args(argv)

    if args.list:
        print(list_tools())
        return 0

    if not args.tool:
        parser.print_usage(sys.stderr)
        print("Error: a tool name is required", file=sys.stderr)
        return 2

    try:
        config = get_config()
    except ValidationError as e:
        logger.error(f"Failed to load configuration: {e}")
        print("Error: MOZ_API_TOKEN environment variable is required", file=sys.stderr)
        return 1

    logging.getLogger().setLevel(logging.DEBUG if args.verbose else config.log_level)

    try:
        arguments = parse_arguments(args.arguments)
        output = asyncio.run(invoke_tool(args.tool, arguments))
    except (InvalidArgumentError, UnknownToolError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    except MozAnalyticsError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        print("\nInterrupted by user.", file=sys.stderr)
        return 130

    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
