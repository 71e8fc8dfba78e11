"""Gallery build pipeline: config, scan, captions, output."""

import logging
from pathlib import Path

from folio.core.emit import write_data, write_static_assets
from folio.core.load.captions import collect_captions
from folio.core.load.config import CONFIG_FILENAME, load_config
from folio.core.scan import discover_files
from folio.core.shapes import Gallery

logger = logging.getLogger(__name__)


def load_gallery(directory: str | Path) -> Gallery:
    """Resolve config, discover images and collect captions without writing anything."""
    directory = Path(directory)

    config = load_config(directory / CONFIG_FILENAME)
    files = discover_files(directory, config.file_extensions)
    captions = collect_captions(directory, files)

    return Gallery(files=files, captions=captions, config=config)


def build_gallery(directory: str | Path) -> Gallery:
    """Build the gallery in ``directory``: write data.js and the static front-end."""
    directory = Path(directory)

    gallery = load_gallery(directory)
    write_data(directory, gallery)
    write_static_assets(directory)

    logger.info(
        f"Gallery built in {directory}: {len(gallery.files)} image(s), "
        f"{len(gallery.captions)} caption(s)"
    )
    return gallery
