"""CLI commands for circle-badge."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from rich.logging import RichHandler
from rich.prompt import IntPrompt, Prompt

from circle_badge.colors import COLORS, InvalidColorError, get_available_colors
from circle_badge.config import get_icons_dir, set_icons_dir
from circle_badge.display import (
    console,
    err_console,
    print_badge_result,
    print_colors,
    print_config_result,
    print_error,
    print_icons,
    print_import_result,
)
from circle_badge.generator import DEFAULT_SIZE, BadgeConfig, generate_badge
from circle_badge.icon import IconLoadError
from circle_badge.icons import import_icons, list_icons

DEFAULT_OUTPUT = "badge"
NO_ICON = "none"


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {value!r}") from None
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be positive: {value}")
    return number


def build_parser() -> argparse.ArgumentParser:
    """Build and return the argument parser."""
    parser = argparse.ArgumentParser(
        prog="circle-badge",
        description="Generate circular PNG badges with an icon and a text label",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command")

    create_p = subparsers.add_parser("create", help="Create a badge (prompts when --text is omitted)")
    create_p.add_argument("--text", "-t", default=None, help="Badge label text")
    create_p.add_argument("--color", "-c", default="primary", help="Color name (see: circle-badge colors)")
    create_p.add_argument("--icon", "-i", default=None, help="SVG filename from the icons directory")
    create_p.add_argument("--output", "-o", default=f"{DEFAULT_OUTPUT}.png", help="Output PNG path")
    create_p.add_argument("--size", "-s", type=_positive_int, default=DEFAULT_SIZE, help="Badge size in pixels")
    create_p.add_argument("--icons-dir", default=None, help="Override icons directory")
    create_p.add_argument("--make-dirs", action="store_true", help="Create missing output directories")

    subparsers.add_parser("colors", help="List available colors")

    icons_p = subparsers.add_parser("icons", help="Manage the SVG icon library")
    icons_sub = icons_p.add_subparsers(dest="icons_command")
    icons_list_p = icons_sub.add_parser("list", help="List available icons")
    icons_list_p.add_argument("--icons-dir", default=None, help="Override icons directory")
    icons_import_p = icons_sub.add_parser("import", help="Import SVGs from a local directory, recolored white")
    icons_import_p.add_argument("source", help="Directory containing SVG files")
    icons_import_p.add_argument("--icons-dir", default=None, help="Override icons directory")

    config_p = subparsers.add_parser("config", help="Persist settings")
    config_p.add_argument("--icons-dir", required=True, help="Directory holding SVG icons")
    return parser


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
    )


def _resolve_icons_dir(raw: str | None) -> Path:
    if raw:
        return Path(raw).expanduser()
    return get_icons_dir()


def main(argv: list[str] | None = None) -> None:
    """Entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)
    command = args.command

    if command is None:
        parser.print_help()
        return

    if command == "create":
        if args.text is not None and not args.text.strip():
            parser.error("--text must not be empty")
        icons_dir = _resolve_icons_dir(args.icons_dir)
        if args.text is None:
            config = prompt_for_config(icons_dir)
        else:
            config = BadgeConfig(
                text=args.text,
                color=args.color,
                output=args.output,
                size=args.size,
                icon=args.icon,
            )
        result = do_create(config, icons_dir=icons_dir, make_dirs=args.make_dirs)
    elif command == "colors":
        result = do_colors()
    elif command == "icons":
        icons_dir = _resolve_icons_dir(args.icons_dir if args.icons_command else None)
        if args.icons_command == "import":
            result = do_icons_import(Path(args.source).expanduser(), icons_dir)
        else:
            result = do_icons_list(icons_dir)
    else:
        result = do_config(icons_dir=args.icons_dir)

    if not result.get("ok"):
        raise SystemExit(1)


def prompt_for_config(icons_dir: Path) -> BadgeConfig:
    """Ask for badge settings interactively."""
    text = ""
    while not text.strip():
        text = Prompt.ask("Enter the badge text", console=console)

    icon: str | None = None
    icons = list_icons(icons_dir)
    if icons:
        answer = Prompt.ask(
            "Choose an SVG icon (blank for none)",
            console=console,
            choices=[NO_ICON, *icons],
            default=NO_ICON,
            show_choices=len(icons) <= 20,
        )
        icon = None if answer == NO_ICON else answer
    else:
        console.print(f"[yellow]No icons in {icons_dir}; the badge will have no icon.[/]")

    color = Prompt.ask(
        "Choose a color",
        console=console,
        choices=get_available_colors(),
        default="primary",
    )

    output = ""
    while not output.strip():
        output = Prompt.ask(
            "Enter the output filename (without extension)",
            console=console,
            default=DEFAULT_OUTPUT,
        )

    size = IntPrompt.ask("Enter the badge size", console=console, default=DEFAULT_SIZE)
    while size <= 0:
        size = IntPrompt.ask("Size must be positive", console=console, default=DEFAULT_SIZE)

    return BadgeConfig(text=text, color=color, output=f"{output.strip()}.png", size=size, icon=icon)


def do_create(config: BadgeConfig, icons_dir: Path | None = None, make_dirs: bool = False) -> dict:
    """Render a badge and report the outcome."""
    console.print("\nGenerating badge...")
    try:
        output = generate_badge(config, icons_dir=icons_dir, make_dirs=make_dirs)
    except (InvalidColorError, IconLoadError) as exc:
        print_error(f"Error generating badge: {exc}")
        return {"ok": False, "reason": str(exc)}
    if output is None:
        print_error(f"Error generating badge: could not save {config.output}")
        return {"ok": False, "reason": "write_failed"}

    result = {
        "ok": True,
        "output": str(Path(output).resolve()),
        "text": config.text,
        "color": config.color,
        "icon": config.icon,
        "size": config.size or DEFAULT_SIZE,
    }
    print_badge_result(result)
    return result


def do_colors() -> dict:
    """List the color registry."""
    colors = dict(COLORS)
    print_colors(colors)
    return {"ok": True, "colors": colors}


def do_icons_list(icons_dir: Path) -> dict:
    """List icons available for badges."""
    icons = list_icons(icons_dir)
    print_icons(icons, str(icons_dir))
    return {"ok": True, "icons": icons, "icons_dir": str(icons_dir)}


def do_icons_import(source: Path, icons_dir: Path) -> dict:
    """Import and recolor SVG icons from a local directory."""
    try:
        written = import_icons(source, icons_dir)
    except OSError as exc:
        print_error(f"Error importing icons: {exc}")
        return {"ok": False, "reason": str(exc)}
    result = {"ok": True, "icons": written, "source": str(source), "icons_dir": str(icons_dir)}
    print_import_result(result)
    return result


def do_config(icons_dir: str, config_path: Path | None = None) -> dict:
    """Persist the icons directory."""
    expanded = Path(icons_dir).expanduser().resolve()
    set_icons_dir(expanded, config_path)
    result = {"ok": True, "icons_dir": str(expanded)}
    print_config_result(result)
    return result
