"""CLI entry point for design-export.

Exports a stored design document to one of the supported formats, either
persisting it through the configured storage backend or printing the
rendered payload.
"""

import argparse
import json
import sys
from pathlib import Path

from dotenv import load_dotenv

from design_export.adapters import get_adapter, list_adapters
from design_export.config import (
    get_environment,
    get_environment_info,
    get_log_level,
    list_environment_variables,
)
from design_export.core import get_logger, setup_logging
from design_export.dispatch import ExportDispatcher, ExportError, render_payload
from design_export.model import CanonicalDesign, ExportFormat
from design_export.storage import LocalFileStorage, create_storage

logger = get_logger("cli")


def _load_design(path: Path) -> CanonicalDesign:
    """Read a design file holding ``components`` and ``designTokens``."""
    data = json.loads(path.read_text(encoding="utf-8"))
    return CanonicalDesign.from_payload(data)


# =============================================================================
# Export Command
# =============================================================================


def cmd_export(args: argparse.Namespace) -> int:
    """Handle the export command."""
    try:
        design = _load_design(args.design)
    except (OSError, ValueError) as e:
        logger.error(f"Could not read design file {args.design}: {e}")
        return 1

    project_name = args.name or args.design.stem

    if args.dry_run:
        print(render_payload(args.format, design, project_name))
        return 0

    if args.output_dir:
        storage = LocalFileStorage(args.output_dir)
    else:
        try:
            storage = create_storage(args.backend)
        except ValueError as e:
            logger.error(str(e))
            return 1

    try:
        result = ExportDispatcher(storage).export(
            args.format, design, None, project_name, args.project_key
        )
    except ExportError as e:
        logger.error(str(e))
        return 1

    print(json.dumps(result.to_dict(), indent=2))
    return 0


# =============================================================================
# Info Commands
# =============================================================================


def cmd_formats(_args: argparse.Namespace) -> int:
    """List available export formats."""
    for fmt in list_adapters():
        adapter = get_adapter(fmt)
        print(f"{fmt.value:<10} .{adapter.file_extension:<6} {adapter.content_type}")
    return 0


def cmd_config(args: argparse.Namespace) -> int:
    """Show resolved configuration values."""
    for var in list_environment_variables(args.category):
        info = get_environment_info(var)
        value = get_environment(var)
        if value is not None and "TOKEN" in info.name:
            value = "***"
        print(f"{info.name:<24} {value!s:<28} {info.description}")
    return 0


def handle_export_command(argv: list[str]) -> int:
    """Parse and run the export command."""
    parser = argparse.ArgumentParser(
        prog="python -m design_export export",
        description="Export a design document to an external format",
    )
    parser.add_argument("design", type=Path, help="Design JSON file")
    parser.add_argument(
        "--format",
        "-f",
        required=True,
        choices=[f.value for f in ExportFormat],
        help="Target format",
    )
    parser.add_argument(
        "--name",
        "-n",
        help="Project name (defaults to the design file name)",
    )
    parser.add_argument(
        "--project-key",
        help="Storage path segment (defaults to the project name)",
    )
    parser.add_argument(
        "--backend",
        "-b",
        choices=["local", "memory", "http"],
        help="Storage backend (defaults to EXPORT_STORAGE_BACKEND)",
    )
    parser.add_argument(
        "--output-dir",
        "-o",
        type=Path,
        help="Store under this directory instead of the configured backend",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the rendered payload without storing it",
    )
    return cmd_export(parser.parse_args(argv))


def handle_formats_command(argv: list[str]) -> int:
    """Parse and run the formats command."""
    parser = argparse.ArgumentParser(
        prog="python -m design_export formats",
        description="List available export formats",
    )
    return cmd_formats(parser.parse_args(argv))


def handle_config_command(argv: list[str]) -> int:
    """Parse and run the config command."""
    parser = argparse.ArgumentParser(
        prog="python -m design_export config",
        description="Show resolved configuration values",
    )
    parser.add_argument(
        "--category",
        "-c",
        choices=["storage", "logging"],
        help="Only show one category",
    )
    return cmd_config(parser.parse_args(argv))


def show_help() -> None:
    """Display CLI help message."""
    print("Usage: python -m design_export {command} [args]")
    print("\nCommands:")
    print("  export     Export a design file to framer, figma, webflow or html")
    print("  formats    List available export formats")
    print("  config     Show resolved configuration values")
    print("\nExamples:")
    print("  python -m design_export export design.json -f html -n 'My Site'")
    print("  python -m design_export export design.json -f figma -o ./out")
    print("  python -m design_export export design.json -f webflow --dry-run")


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    load_dotenv()
    argv = sys.argv[1:] if argv is None else argv

    if not argv:
        show_help()
        return 1

    command, rest_args = argv[0], argv[1:]

    if command in ("-h", "--help"):
        show_help()
        return 0

    commands = {
        "export": lambda: handle_export_command(rest_args),
        "formats": lambda: handle_formats_command(rest_args),
        "config": lambda: handle_config_command(rest_args),
    }

    if command in commands:
        setup_logging(get_log_level())
        return commands[command]()

    logger.error(f"Unknown command: {command}")
    show_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
