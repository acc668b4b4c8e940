import logging
import sys
from typing import Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ..core.models import Diagram


def setup_logging(
    level: str = "INFO",
    log_format: Optional[str] = None,
    date_format: Optional[str] = None,
) -> None:
    """
    Setup basic logging configuration for the power_diagram package.

    Args:
        level: The logging level to use. Defaults to "INFO".
        log_format: Custom log format string. If None, uses default format.
        date_format: Custom date format string. If None, uses default format.
    """
    if log_format is None:
        log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    if date_format is None:
        date_format = "%Y-%m-%d %H:%M:%S"

    # Create a StreamHandler that writes to stderr
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(fmt=log_format, datefmt=date_format))

    # Get the root logger for the power_diagram package
    logger = logging.getLogger("power_diagram")
    logger.setLevel(level.upper())
    logger.addHandler(handler)

    # Prevent the logger from propagating messages to the root logger
    logger.propagate = False


def print_view_summary(
    view: Diagram,
    title: str = "Diagram",
    console: Optional[Console] = None,
) -> None:
    """Print the nodes and links of a view as rich tables."""
    console = console or Console()

    nodes = Table(show_header=True, header_style="bold white", expand=True)
    nodes.add_column("Id",       style="bright_yellow")
    nodes.add_column("Type",     style="bright_cyan")
    nodes.add_column("Label")
    nodes.add_column("Position", justify="right")

    for node in view.nodes:
        label = Text(node.label)
        if node.is_external:
            label.append("  (external)", style="dim")
        position = node.pinned or node.position
        nodes.add_row(
            node.id,
            node.type,
            label,
            f"{position[0]:.0f}, {position[1]:.0f}" if position else "-",
        )

    links = Table(show_header=True, header_style="bold white", expand=True)
    links.add_column("Source", style="bright_yellow")
    links.add_column("Target", style="bright_green")
    links.add_column("Properties")

    for link in view.links:
        props = ", ".join(f"{k}={v}" for k, v in link.properties.items())
        links.add_row(
            link.source,
            link.target,
            Text(props + ("  [boundary]" if link.is_boundary else ""),
                 style="magenta" if link.is_boundary else ""),
        )

    console.print(Panel(nodes, expand=False, title=f"{title} - nodes", border_style="bold white"))
    console.print(Panel(links, expand=False, title=f"{title} - links", border_style="bold white"))
    if view.groups:
        console.print(f"Groups: {', '.join(g.label for g in view.groups)}")
