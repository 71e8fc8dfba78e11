"""Caption loading and merging.

Captions come from three sources, lowest precedence first:

1. ``captions.yaml``: a flat mapping of filename to caption
2. ``captions.json``: the same shape, as JSON
3. sidecar files: ``<stem>.html`` next to each image, whose whole content is
   the caption

A later source overrides an earlier one for the same filename. Only filenames
that were discovered in the gallery directory are kept.
"""

import json
import logging
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import TypeAdapter, ValidationError

logger = logging.getLogger(__name__)

YAML_CAPTIONS_FILENAME = "captions.yaml"
JSON_CAPTIONS_FILENAME = "captions.json"
SIDECAR_EXTENSION = ".html"

_caption_map = TypeAdapter(dict[str, str])


def _load_caption_file(path: Path, parse: Callable[[str], Any]) -> dict[str, str]:
    if not path.exists():
        return {}

    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.warning(f"Error reading {path.name}: {e}")
        return {}

    try:
        data = parse(raw)
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        logger.warning(f"Error deserializing {path.name}: {e}")
        return {}

    if data is None:
        return {}

    try:
        return _caption_map.validate_python(data)
    except ValidationError as e:
        logger.warning(
            f"Error deserializing {path.name}: expected a flat mapping of "
            f"filename to caption ({e.error_count()} error(s))"
        )
        return {}


def load_yaml_captions(path: str | Path) -> dict[str, str]:
    return _load_caption_file(Path(path), yaml.safe_load)


def load_json_captions(path: str | Path) -> dict[str, str]:
    return _load_caption_file(Path(path), json.loads)


def sidecar_path(directory: Path, filename: str) -> Path:
    """Return the sidecar caption path for an image, e.g. ``a.jpg`` -> ``a.html``."""
    return (directory / filename).with_suffix(SIDECAR_EXTENSION)


def load_sidecar_captions(directory: str | Path, filenames: list[str]) -> dict[str, str]:
    directory = Path(directory)
    captions: dict[str, str] = {}

    for filename in filenames:
        path = sidecar_path(directory, filename)
        try:
            captions[filename] = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            continue
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Error reading caption file {path.name}: {e}")

    return captions


def merge_captions(
    filenames: list[str], *sources: Mapping[str, str]
) -> dict[str, str]:
    """Merge caption sources, later sources taking precedence.

    Entries for filenames not in ``filenames`` are dropped. The sources are
    not modified.
    """
    merged: dict[str, str] = {}

    for source in sources:
        for filename in filenames:
            if filename in source:
                merged[filename] = source[filename]

    return merged


def collect_captions(directory: str | Path, filenames: list[str]) -> dict[str, str]:
    """Read all caption sources in ``directory`` and merge them for ``filenames``."""
    directory = Path(directory)

    yaml_captions = load_yaml_captions(directory / YAML_CAPTIONS_FILENAME)
    json_captions = load_json_captions(directory / JSON_CAPTIONS_FILENAME)
    sidecar_captions = load_sidecar_captions(directory, filenames)

    captions = merge_captions(filenames, yaml_captions, json_captions, sidecar_captions)
    logger.debug(
        f"Captions: {len(yaml_captions)} from {YAML_CAPTIONS_FILENAME}, "
        f"{len(json_captions)} from {JSON_CAPTIONS_FILENAME}, "
        f"{len(sidecar_captions)} from sidecar files; {len(captions)} in use"
    )
    return captions
