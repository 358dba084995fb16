"""
Console rendering using Rich.
"""
from typing import List

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.text import Text

from my_assistant import __version__

console = Console()


def print_header(provider: str, model: str):
    header = Text()
    header.append("My Assistant", style="bold cyan")
    header.append(f" v{__version__}\n", style="dim")
    header.append(f"Provider: {provider}\n", style="cyan")
    header.append(f"Model: {model}", style="cyan")
    console.print(Panel(header, border_style="cyan"))


def print_tool_summary(descriptions: List[str]):
    """One line per tool (name and description)."""
    console.print("\n[bold green]Agent ready![/bold green]")
    console.print("\n[bold]Available tools:[/bold]")
    for desc in descriptions:
        console.print(f"  - {desc.splitlines()[0]}", markup=False)


def print_tool_details(descriptions: List[str]):
    console.print("\n[bold]Available tools:[/bold]")
    for desc in descriptions:
        console.print()
        console.print(desc, markup=False)
    console.print()


def print_hints():
    console.print("\n[dim]Type 'exit' or 'quit' to exit[/dim]")
    console.print("[dim]Type 'tools' to list available tools[/dim]\n")


def print_assistant_message(content: str, duration_ms: int):
    console.print("\n[bold green]Agent:[/bold green]")
    console.print(content, markup=False)
    console.print(f"\n[dim]Took {duration_ms}ms[/dim]\n")


def print_error(message: str):
    console.print(f"\n[red]Error: {escape(message)}[/red]\n", highlight=False)


def print_goodbye():
    console.print("\n[dim]Goodbye![/dim]\n")
