"""
CLI - Command-line interface for loading DesignOS product definitions.

Commands:
1. load      - load all product data and emit JSON
2. sections  - list section ids
3. section   - emit one section's data as JSON
4. status    - show which design phases are complete
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Any, List, Optional

from dotenv import load_dotenv

from .loaders import ProductLoader, SectionLoader, ProductData
from .core.config import AppConfig, load_config
from .utils.logger import setup_logging, get_logger, log_exception

logger = get_logger(__name__)


# ANSI color codes
class Colors:
    RESET = "\033[0m"
    RED = "\033[91m"
    GREEN = "\033[92m"
    CYAN = "\033[96m"
    BOLD = "\033[1m"
    DIM = "\033[2m"


def color(text: str, color_code: str) -> str:
    """Apply color to text."""
    return f"{color_code}{text}{Colors.RESET}"


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="designos",
        description="Load DesignOS product definitions (markdown + JSON)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s load --root ./my-app -o product.json
  %(prog)s sections
  %(prog)s section task-list
  %(prog)s status --root ./my-app
        """,
    )

    parser.add_argument(
        "--root",
        type=Path,
        help="Project root containing the product/ folder (default: from config)",
    )

    parser.add_argument(
        "-c", "--config",
        type=Path,
        help="Configuration file (YAML)",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )

    parser.add_argument(
        "--indent",
        type=int,
        help="JSON indentation (default: from config)",
    )

    parser.add_argument(
        "--log-file",
        type=Path,
        help="Also write logs to this file",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    load_parser = subparsers.add_parser(
        "load",
        help="Load all product data and print it as JSON",
    )
    load_parser.add_argument(
        "-o", "--output",
        type=Path,
        help="Output JSON file (default: stdout)",
    )
    load_parser.add_argument(
        "--with-sections",
        action="store_true",
        help="Include every section's data in the output",
    )

    subparsers.add_parser(
        "sections",
        help="List section ids",
    )

    section_parser = subparsers.add_parser(
        "section",
        help="Print one section's data as JSON",
    )
    section_parser.add_argument(
        "section_id",
        help="Section directory name under product/sections/",
    )

    subparsers.add_parser(
        "status",
        help="Show which design phases are complete",
    )

    return parser


def resolve_config(args: argparse.Namespace) -> AppConfig:
    """
    Load configuration and apply command-line overrides.

    Raises:
        FileNotFoundError: If an explicit config file is missing
        ValueError: If the config file is invalid
    """
    config = load_config(args.config)

    if args.root is not None:
        config.paths.project_root = args.root
    if args.indent is not None:
        config.output.indent = args.indent
    if args.verbose:
        config.logging.level = "DEBUG"
    if args.log_file is not None:
        config.logging.file = args.log_file

    return config


def to_json(data: Any, config: AppConfig) -> str:
    """Serialize loader output according to the output config."""
    output = config.output
    return json.dumps(
        data,
        indent=output.indent if output.pretty_print else None,
        sort_keys=output.sort_keys,
        ensure_ascii=output.ensure_ascii,
        default=str,
    )


def cmd_load(args: argparse.Namespace, config: AppConfig) -> int:
    product = ProductLoader(config=config).load_product_data()

    payload = product.to_dict()
    if args.with_sections:
        sections = SectionLoader(config=config).load_all_sections()
        payload["sections"] = [section.to_dict() for section in sections]

    json_str = to_json(payload, config)

    if args.output:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_text(json_str, encoding="utf-8")
        logger.info(f"Output written to: {args.output}")
    else:
        print(json_str)

    if product.is_empty:
        logger.warning(f"No product files found under {config.paths.product_root}")
    return 0


def cmd_sections(args: argparse.Namespace, config: AppConfig) -> int:
    for section_id in SectionLoader(config=config).get_all_section_ids():
        print(section_id)
    return 0


def cmd_section(args: argparse.Namespace, config: AppConfig) -> int:
    loader = SectionLoader(config=config)
    if not loader.has_section(args.section_id):
        logger.error(f"Section not found: {args.section_id} (in {loader.sections_root})")
        return 1

    print(to_json(loader.load_section_data(args.section_id).to_dict(), config))
    return 0


def cmd_status(args: argparse.Namespace, config: AppConfig) -> int:
    statuses = ProductLoader(config=config).get_phase_status()

    print(color(f"Product: {config.paths.product_root}", Colors.BOLD + Colors.CYAN))
    for index, status in enumerate(statuses, start=1):
        if status.complete:
            mark = color("[x]", Colors.GREEN)
        else:
            mark = color("[ ]", Colors.DIM)
        print(f"  {mark} {index}. {status.label}")

    done = sum(1 for status in statuses if status.complete)
    print(color(f"{done}/{len(statuses)} phases complete", Colors.BOLD))
    return 0


COMMANDS = {
    "load": cmd_load,
    "sections": cmd_sections,
    "section": cmd_section,
    "status": cmd_status,
}


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point.

    Args:
        argv: Argument list (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    load_dotenv()

    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    try:
        config = resolve_config(args)
    except FileNotFoundError as e:
        print(color(f"[ERROR] {e}", Colors.RED), file=sys.stderr)
        return 1
    except ValueError as e:
        print(color(f"[ERROR] Invalid configuration: {e}", Colors.RED), file=sys.stderr)
        return 1

    setup_logging(
        level=config.logging.level,
        format_string=config.logging.format,
        log_file=config.logging.file,
    )

    try:
        return COMMANDS[args.command](args, config)
    except OSError as e:
        logger.error(f"I/O error: {e}")
        return 1
    except Exception as e:
        log_exception(logger, "Unexpected error", e)
        return 1


def load_project(
    root: Optional[str | Path] = None,
    config: Optional[AppConfig] = None,
) -> ProductData:
    """
    Programmatic interface: load all product data for a project.

    Args:
        root: Project root containing product/ (overrides config)
        config: Optional configuration

    Returns:
        ProductData; missing pieces are None
    """
    return ProductLoader(config=config, project_root=root).load_product_data()


if __name__ == "__main__":
    sys.exit(main())
