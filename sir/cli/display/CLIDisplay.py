"""CLI display implementation using Rich library."""

import json
import sys
from datetime import datetime
from typing import Any

import yaml
from pygments import highlight
from pygments.formatters import Terminal256Formatter
from pygments.lexers import JsonLexer, YamlLexer
from rich.console import Console


class CLIDisplay:
    """Status lines on stderr, structured output on stdout."""

    def __init__(self) -> None:
        self.stderr_console = Console(file=sys.stderr)

    @staticmethod
    def _timestamp() -> str:
        return datetime.now().strftime("%H:%M:%S")

    def status(self, message: str) -> None:
        self.stderr_console.print(f"[dim]{self._timestamp()}[/dim] [blue]i[/blue] {message}")

    def success(self, message: str) -> None:
        self.stderr_console.print(f"[dim]{self._timestamp()}[/dim] [green]✓[/green] {message}")

    def error(self, message: str, details: str = "") -> None:
        self.stderr_console.print(f"[dim]{self._timestamp()}[/dim] [red]✗[/red] {message}")
        if details:
            self.stderr_console.print(f"  [dim]{details}[/dim]")

    def warning(self, message: str) -> None:
        self.stderr_console.print(f"[yellow]⚠[/yellow] {message}")

    def info(self, message: str) -> None:
        self.stderr_console.print(message)

    def output(self, data: Any, format: str = "yaml") -> None:
        """Print command output as YAML or JSON, highlighted when stdout is a terminal."""
        if format == "yaml":
            text = yaml.dump(data, default_flow_style=False, sort_keys=False, allow_unicode=True)
            lexer = YamlLexer()
        else:
            text = json.dumps(data, indent=2, ensure_ascii=False) + "\n"
            lexer = JsonLexer()

        if sys.stdout.isatty():
            text = highlight(text, lexer, Terminal256Formatter(style="monokai"))
        print(text, end="")
