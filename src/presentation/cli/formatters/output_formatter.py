"""
Output formatter for CLI commands.

This module provides consistent formatting for CLI output: rich tables
on a terminal, plain tabulate grids when piping, and JSON.
"""

from typing import Any, Dict, List, Mapping, Optional, Union
import json

from tabulate import tabulate
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.text import Text

from ....core.entities import DiscordUser, SearchResult, Statistics

_CONTENT_PREVIEW = 80


def _preview(content: str, width: int = _CONTENT_PREVIEW) -> str:
    flat = " ".join(content.split())
    return flat if len(flat) <= width else flat[:width - 3] + "..."


class OutputFormatter:
    """
    Formatter for CLI command output.

    This class provides methods for formatting different types of output
    in a consistent and reusable way.
    """

    def __init__(self, use_rich: bool = True, console: Optional[Console] = None):
        """
        Initialize the formatter.

        Args:
            use_rich: Whether to use rich formatting
            console: Optional console to print to
        """
        self.use_rich = use_rich
        self.console = (console or Console()) if use_rich else None

    def format_table(
        self,
        data: List[Dict[str, Any]],
        headers: List[str],
        title: Optional[str] = None
    ) -> Union[Table, str]:
        """
        Format data as a table.

        Args:
            data: List of dictionaries containing row data
            headers: Column keys, in display order
            title: Optional table title

        Returns:
            Union[Table, str]: Rich table, or a plain grid
        """
        if not data:
            return "No data to display"

        if self.use_rich:
            table = Table(title=title) if title else Table()
            for header in headers:
                table.add_column(header)
            for row in data:
                table.add_row(*[str(row.get(key, "")) for key in headers])
            return table

        grid = tabulate(
            [[row.get(key, "") for key in headers] for row in data],
            headers=headers,
            tablefmt="grid"
        )
        return f"{title}\n{grid}" if title else grid

    def format_search_result(
        self,
        result: SearchResult,
        users: Optional[Mapping[str, DiscordUser]] = None
    ) -> Union[Table, str]:
        """
        Format one page of messages.

        Args:
            result: Search result page
            users: Resolved authors keyed by id

        Returns:
            Union[Table, str]: Formatted page
        """
        users = users or {}
        rows = []
        for message in result.messages:
            author = users.get(message.author_id)
            rows.append({
                "timestamp": message.timestamp,
                "author": author.username if author else message.author_id,
                "channel": message.channel_id,
                "content": _preview(message.content)
            })

        title = f"Page {result.page} of {result.total} matches"
        if result.has_more:
            title += " (more available)"
        if not rows:
            return f"No messages found ({result.total} matches)"
        return self.format_table(rows, ["timestamp", "author", "channel", "content"], title)

    def format_statistics(self, statistics: Statistics) -> Union[Table, str]:
        rows = [
            {"metric": "Total messages", "value": f"{statistics.total_messages:,}"},
            {"metric": "Unique users (approx.)", "value": f"{statistics.unique_users:,}"},
            {"metric": "Unique guilds (approx.)", "value": f"{statistics.unique_guilds:,}"}
        ]
        return self.format_table(rows, ["metric", "value"], "Archive statistics")

    def format_user(self, user: DiscordUser) -> Union[Table, str]:
        rows = [{"id": user.id, "username": user.username, "avatar": user.avatar or "-"}]
        return self.format_table(rows, ["id", "username", "avatar"])

    def format_json(
        self,
        data: Union[Dict[str, Any], List[Any]],
        pretty: bool = True
    ) -> str:
        """
        Format data as JSON.

        Args:
            data: Data to format
            pretty: Whether to pretty print

        Returns:
            str: Formatted JSON
        """
        if pretty:
            return json.dumps(data, indent=2, ensure_ascii=False)
        return json.dumps(data, ensure_ascii=False)

    def format_error(
        self,
        message: str,
        details: Optional[str] = None
    ) -> Union[Panel, str]:
        """
        Format error message.

        Args:
            message: Error message
            details: Optional error details

        Returns:
            Union[Panel, str]: Formatted error
        """
        if self.use_rich:
            error_text = Text(message, style="bold red")
            if details:
                error_text.append("\n" + details, style="red")
            return Panel(error_text, title="Error", border_style="red")
        if details:
            return f"Error: {message}\n{details}"
        return f"Error: {message}"

    def print(
        self,
        content: Any,
        style: Optional[str] = None
    ) -> None:
        """
        Print content with optional styling.

        Args:
            content: Content to print
            style: Optional style
        """
        if self.use_rich:
            if style:
                self.console.print(content, style=style)
            else:
                self.console.print(content)
        else:
            print(content)
