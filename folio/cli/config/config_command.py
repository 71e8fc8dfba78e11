from pathlib import Path

from rich.console import Console
from rich.markup import escape

from folio.core.emit import OutputWriteError
from folio.core.load.config import CONFIG_FILENAME, write_default_config

console = Console()
err_console = Console(stderr=True)


def config_command(args):
    target = Path(args.directory) / CONFIG_FILENAME

    try:
        write_default_config(target)
    except OutputWriteError as e:
        err_console.print(f"[red]{escape(str(e))}[/red]", highlight=False, soft_wrap=True)
        return 1

    console.print(f"[green]✓[/green] Default configuration file written to {target}")
    return 0
