"""Rich terminal display for circle-badge."""

from __future__ import annotations

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from circle_badge.colors import COLORS

console = Console()
err_console = Console(stderr=True)


def print_badge_result(result: dict) -> None:
    """Print badge generation result."""
    color = result.get("color", "primary")
    icon = result.get("icon") or "none"
    lines: list[str] = []
    lines.append("")
    lines.append(f"  Badge saved to: [bold]{escape(str(result.get('output', '')))}[/]")
    lines.append(f"  Text:  {escape(result.get('text', ''))}")
    lines.append(f"  Color: [{COLORS.get(color, 'white')}]{color}[/]")
    lines.append(f"  Icon:  {icon}")
    lines.append(f"  Size:  {result.get('size', 200)}px")
    lines.append("")

    content = "\n".join(lines)
    panel = Panel(
        content,
        title="[bold]Badge Generated[/]",
        box=box.ROUNDED,
        border_style="green",
        width=50,
    )
    console.print(panel)


def print_colors(colors: dict[str, str]) -> None:
    """Print available badge colors as a table with swatches."""
    table = Table(
        title="Badge Colors",
        box=box.ROUNDED,
        show_header=True,
        header_style="bold",
    )
    table.add_column("", width=2)
    table.add_column("Name", style="bold")
    table.add_column("Hex", justify="right")

    for name, hex_value in colors.items():
        table.add_row(f"[{hex_value}]●[/]", name, hex_value)

    console.print(table)


def print_icons(icons: list[str], icons_dir: str) -> None:
    """Print the SVG icons available in the icons directory."""
    if not icons:
        console.print(
            f"[yellow]No icons found in {icons_dir}. "
            "Run: circle-badge icons import <dir>[/]"
        )
        return

    table = Table(
        title=f"Icons ({len(icons)}) in {icons_dir}",
        box=box.ROUNDED,
        show_header=False,
    )
    table.add_column("Icon")
    for name in icons:
        table.add_row(name)
    console.print(table)


def print_import_result(result: dict) -> None:
    """Print icon import result."""
    lines: list[str] = []
    lines.append("")
    lines.append(f"  Imported: [bold]{len(result.get('icons', []))}[/] icons")
    lines.append(f"  From:     {result.get('source', '')}")
    lines.append(f"  Into:     {result.get('icons_dir', '')}")
    lines.append("")

    panel = Panel(
        "\n".join(lines),
        title="[bold]Icons Imported[/]",
        box=box.ROUNDED,
        border_style="cyan",
        width=60,
    )
    console.print(panel)


def print_config_result(result: dict) -> None:
    """Print confirmation after saving settings."""
    console.print(f"[green]Icons directory set to:[/] [bold]{result.get('icons_dir', '')}[/]")


def print_error(message: str) -> None:
    """Print a one-line error."""
    err_console.print(f"[red]{escape(message)}[/]")
