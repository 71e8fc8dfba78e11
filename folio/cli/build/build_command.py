#!/usr/bin/env python3
"""CLI command to build the gallery in a directory."""

from pathlib import Path

from rich.console import Console
from rich.markup import escape

from folio.core.build import build_gallery
from folio.core.emit import DATA_FILENAME, OutputWriteError
from folio.core.load.config import ConfigError
from folio.core.scan import DirectoryScanError

console = Console()
err_console = Console(stderr=True)


def build_command(args):
    directory = Path(args.directory)

    try:
        gallery = build_gallery(directory)
    except (ConfigError, DirectoryScanError, OutputWriteError) as e:
        err_console.print(f"[red]{escape(str(e))}[/red]", highlight=False, soft_wrap=True)
        return 1

    console.print(
        f"[green]✓[/green] Wrote {DATA_FILENAME} with {len(gallery.files)} image(s) "
        f"and {len(gallery.captions)} caption(s)"
    )
    if not gallery.files:
        console.print(
            "[yellow]No images found. Extensions searched: "
            f"{', '.join(sorted(gallery.config.file_extensions))}[/yellow]"
        )
    return 0
