"""CLI interface for Expsum - generate experiment summaries from the terminal."""

import argparse
import logging
import sys

from pydantic import ValidationError

from expsum.collector import CollectError, ExperimentCollector
from expsum.config import get_settings


class Colors:
    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"
    CYAN = "\033[36m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    RED = "\033[31m"


def setup_logging(verbose: bool = False) -> None:
    """Configure console logging for CLI."""
    console = logging.StreamHandler()
    console.setLevel(logging.DEBUG if verbose else logging.INFO)
    logging.basicConfig(
        format="%(message)s",
        level=logging.DEBUG if verbose else logging.INFO,
        handlers=[console],
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="expsum",
        description="Generate experiment result and task list summaries for an Obsidian vault.",
    )
    parser.add_argument(
        "--vault",
        type=str,
        help="Path to the vault (overrides VAULT_PATH)",
    )
    parser.add_argument(
        "--models-folder",
        type=str,
        help="Folder inside the vault holding one subfolder per model (default: models)",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the generated summaries instead of writing them",
    )
    parser.add_argument(
        "--no-debug-log",
        action="store_true",
        help="Do not append to the debug log file in the vault",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show debug messages",
    )
    return parser


def cli(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    overrides = {"vault_path": args.vault, "models_folder": args.models_folder}
    if args.no_debug_log:
        overrides["debug_log_enabled"] = False

    try:
        settings = get_settings(**overrides)
        logger.info(f"{Colors.DIM}Vault: {settings.vault_path}{Colors.RESET}")
    except ValidationError as e:
        logger.error(f"{Colors.RED}Failed to load settings: {e}{Colors.RESET}")
        logger.error(
            f"{Colors.RED}Pass --vault or set VAULT_PATH in the environment or a .env file.{Colors.RESET}"
        )
        sys.exit(1)

    collector = ExperimentCollector(settings)

    if args.dry_run:
        try:
            rendered = collector.render()
        except CollectError as e:
            print(f"{Colors.YELLOW}{e}{Colors.RESET}")
            sys.exit(2)

        for file_name, content in rendered.items():
            print(f"{Colors.BOLD}{Colors.CYAN}{file_name}{Colors.RESET}\n")
            print(content)
        return

    result = collector.collect()

    if not result.success:
        print(f"{Colors.YELLOW}{result.message}{Colors.RESET}")
        sys.exit(2)

    print(f"{Colors.GREEN}✓ {result.message}{Colors.RESET}")


if __name__ == "__main__":
    cli()
