"""Write the gallery data file and the static front-end next to the images."""

import json
import logging
import shutil
from pathlib import Path

from folio.core.shapes import Gallery

logger = logging.getLogger(__name__)

DATA_FILENAME = "data.js"
STATIC_DIR = Path(__file__).parent / "static"


class OutputWriteError(Exception):
    """Exception raised when a generated file cannot be written."""

    pass


def _js_literal(value, pretty: bool = False, sort_keys: bool = False) -> str:
    return json.dumps(value, indent=2 if pretty else None, sort_keys=sort_keys)


def render_data(gallery: Gallery) -> str:
    """Render the gallery as JavaScript source for the front-end.

    Defines FILES, CAPTIONS, TITLE, DEFAULT_CAPTION and THUMB_SIZE. Caption keys
    are sorted so identical inputs always produce identical output.
    """
    config = gallery.config
    pretty = config.pretty_json

    files = _js_literal(gallery.files, pretty=pretty)
    captions = _js_literal(gallery.captions, pretty=pretty, sort_keys=True)

    lines = [
        f"const FILES = {files};",
        f"const CAPTIONS = new Map(Object.entries({captions}));",
        f"const TITLE = {_js_literal(config.gallery_title)};",
        f"const DEFAULT_CAPTION = {_js_literal(config.default_caption)};",
        f"const THUMB_SIZE = {int(config.thumbnail_size)};",
    ]
    return "\n".join(lines) + "\n"


def write_data(directory: str | Path, gallery: Gallery) -> Path:
    """Write data.js into ``directory``, replacing any previous version."""
    output_path = Path(directory) / DATA_FILENAME

    try:
        with open(output_path, "w", encoding="utf-8") as f:
            f.write(render_data(gallery))
    except OSError as e:
        raise OutputWriteError(f"Error writing to {output_path}: {e}") from e

    logger.debug(f"Wrote {output_path}")
    return output_path


def static_asset_names() -> list[str]:
    return sorted(p.name for p in STATIC_DIR.iterdir() if p.is_file())


def write_static_assets(directory: str | Path) -> list[Path]:
    """Copy the front-end files into ``directory``, overwriting existing copies."""
    directory = Path(directory)
    written: list[Path] = []

    for name in static_asset_names():
        target = directory / name
        try:
            shutil.copyfile(STATIC_DIR / name, target)
        except OSError as e:
            raise OutputWriteError(f"Error writing {target}: {e}") from e
        written.append(target)

    logger.debug(f"Copied {len(written)} static asset(s) to {directory}")
    return written
