# src/pacmanconf/cli/formatter.py
from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

from pacmanconf.core.models import Config

# Shared consoles: results go to stdout, diagnostics to stderr
console = Console()
err_console = Console(stderr=True)


class ConfFormatter:
    """
    Renders parsed configurations for the terminal.
    """

    def _cell(self, values) -> str:
        return " ".join(values) if values else "[dim]-[/dim]"

    def print_options(self, config: Config, source: str):
        """Two-column table of every [options] field."""
        table = Table(title=f"[options] from {source}", show_header=True, header_style="bold magenta")
        table.add_column("Field", style="cyan", no_wrap=True)
        table.add_column("Value")

        for name, value in vars(config.options).items():
            if isinstance(value, bool):
                shown = "[green]yes[/green]" if value else "[dim]no[/dim]"
            elif isinstance(value, tuple):
                shown = self._cell(value)
            else:
                shown = str(value) or "[dim]-[/dim]"
            table.add_row(name, shown)

        console.print(table)

    def print_repos(self, config: Config):
        """One row per repository, in file order."""
        if not config.repos:
            console.print("[bold yellow]No repositories defined.[/bold yellow]")
            return

        table = Table(title="Repositories", show_lines=True, header_style="bold magenta")
        table.add_column("Name", style="cyan", no_wrap=True)
        table.add_column("Servers")
        table.add_column("SigLevel")
        table.add_column("Usage")

        for repo in config.repos:
            servers = "\n".join(repo.servers) if repo.servers else "[dim]-[/dim]"
            table.add_row(repo.name, servers, self._cell(repo.sig_level), self._cell(repo.usage))

        console.print(table)

    def print_text(self, text: str, lexer: str, title: str):
        """Highlighted panel on a terminal, plain text when piped."""
        if not console.is_terminal:
            console.out(text, end="", highlight=False)
            return
        syntax = Syntax(text.rstrip(), lexer, theme="monokai", line_numbers=False)
        console.print(Panel(syntax, title=title, border_style="green"))

    def print_error(self, message: str):
        err_console.print(f"[bold red]Error:[/bold red] {message}", highlight=False)
