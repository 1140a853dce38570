"""Print the content tree of an API description as an outline."""

from __future__ import annotations

import argparse
import asyncio
import json

from apimenu.config import APIMENU_MAX_HEADING_LEVEL
from apimenu.context import BuildOptions
from apimenu.pipeline import build_from_source
from apimenu.utils.logging_config import configure_logging


def main() -> None:
    parser = argparse.ArgumentParser(description="Show the navigation tree built from an OpenAPI description.")
    parser.add_argument("source", help="URL or local path of a JSON/YAML API description")
    parser.add_argument(
        "--max-heading-level",
        type=int,
        default=APIMENU_MAX_HEADING_LEVEL,
        help="Deepest heading level turned into a section (default: APIMENU_MAX_HEADING_LEVEL)",
    )
    parser.add_argument("--show-extensions", action="store_true", help="Keep x-* operation extensions")
    parser.add_argument("--json", action="store_true", help="Dump the tree as JSON instead of an outline")
    parser.add_argument("--log-level", default=None, help="Logging level (default: APIMENU_LOG_LEVEL)")
    args = parser.parse_args()

    configure_logging(args.log_level)
    options = BuildOptions(max_heading_level=args.max_heading_level, show_extensions=args.show_extensions)
    result, metadata = asyncio.run(build_from_source(args.source, options))

    if args.json:
        items = [item.model_dump(mode="json", by_alias=True) for item in result.items]
        print(json.dumps({"metadata": metadata, "items": items}, indent=2))
        return

    print(result.summary)
    print(f"Security schemes under: {metadata['security_scheme_prefix']}")
    print()
    print(result.outline)


if __name__ == "__main__":
    main()
