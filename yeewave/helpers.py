import datetime
from typing import Dict, Any, Tuple

from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn, BarColumn, TimeRemainingColumn
from rich.table import Table

# Initialize rich console
console = Console()

def check_courant(c: float, dt: float, limit: float = 1.0) -> Tuple[bool, float, float]:
    """
    Check the Courant condition of the unit-cell scheme.

    With dx = dy = 1 the Courant factor reduces to c * dt, and the explicit
    update is only stable while it stays strictly below the limit.

    Args:
        c: Wave speed
        dt: Time step
        limit: Upper bound for the Courant factor

    Returns:
        tuple: (is_stable, courant, limit)
    """
    courant = c * dt
    return courant < limit, courant, limit

def display_status(status: str, status_type: str = "info") -> None:
    """
    Display a status message with appropriate styling.

    Args:
        status: The status message to display
        status_type: One of "info", "success", "warning", "error"
    """
    style_map = {
        "info": "blue",
        "success": "green",
        "warning": "yellow",
        "error": "red",
    }
    style = style_map.get(status_type, "white")
    console.print(f"[{style}]● {status}[/]")

def create_rich_progress(disable: bool = False) -> Progress:
    """Create and return a rich progress bar for tracking processes."""
    return Progress(
        SpinnerColumn(),
        TextColumn("[bold blue]{task.description}"),
        BarColumn(bar_width=None),
        "[progress.percentage]{task.percentage:>3.0f}%",
        TimeRemainingColumn(),
        console=console,
        disable=disable,
    )

def display_parameters(params: Dict[str, Any], title: str = "Parameters") -> None:
    """
    Display a dictionary of parameters in a clean, formatted table.

    Args:
        params: Dictionary of parameter names and values
        title: Title for the parameters table
    """
    table = Table(title=title)
    table.add_column("Parameter", style="cyan")
    table.add_column("Value", style="green")

    for key, value in params.items():
        table.add_row(str(key), str(value))

    console.print(table)

def format_elapsed(elapsed: datetime.timedelta) -> str:
    """Format a time span as e.g. '1h 2m 3.4s'."""
    hours, remainder = divmod(elapsed.total_seconds(), 3600)
    minutes, seconds = divmod(remainder, 60)
    time_str = ""
    if hours > 0:
        time_str += f"{int(hours)}h "
    if minutes > 0 or hours > 0:
        time_str += f"{int(minutes)}m "
    time_str += f"{seconds:.1f}s"
    return time_str

def display_time_elapsed(start_time: datetime.datetime) -> None:
    """
    Display the time elapsed since the start time.

    Args:
        start_time: The start datetime
    """
    elapsed = datetime.datetime.now() - start_time
    console.print(f"[bold]Time elapsed:[/] {format_elapsed(elapsed)}")
