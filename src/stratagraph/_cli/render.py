"""Rich rendering utilities for graph commands."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.table import Table

if TYPE_CHECKING:
    from rich.console import Console


def _format_members(members: frozenset[str]) -> str:
    return ", ".join(sorted(members))


def render_component_table(components: list[frozenset[str]], console: Console, *, title: str) -> None:
    """Render strongly connected components as a Rich table.

    Args:
        components: Components in discovery order.
        console: Rich Console to output to.
        title: Table title.

    """
    if not components:
        console.print(f"[dim]{title}: none[/dim]")
        return

    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Size", justify="right")
    table.add_column("Nodes", style="bold")

    for index, component in enumerate(components):
        table.add_row(str(index), str(len(component)), _format_members(component))

    console.print(table)


def render_strata_table(strata: list[frozenset[str]], console: Console) -> None:
    """Render dependency strata as a Rich table.

    Args:
        strata: Strata indexed by level, least dependent first.
        console: Rich Console to output to.

    """
    table = Table(title="Strata", show_header=True, header_style="bold cyan")
    table.add_column("Level", justify="right", style="dim")
    table.add_column("Nodes", style="bold")

    for level, stratum in enumerate(strata):
        table.add_row(str(level), _format_members(stratum))

    console.print(table)
