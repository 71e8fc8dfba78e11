import json
import re
from pathlib import Path
from typing import Any, Callable

import pytest

DATA_JS_PATTERN = re.compile(
    r"const FILES = (?P<files>.*?);\n"
    r"const CAPTIONS = new Map\(Object\.entries\((?P<captions>.*?)\)\);\n"
    r"const TITLE = (?P<title>.*?);\n"
    r"const DEFAULT_CAPTION = (?P<default_caption>.*?);\n"
    r"const THUMB_SIZE = (?P<thumb_size>\d+);\n$",
    re.DOTALL,
)


@pytest.fixture
def parse_data_js() -> Callable[[str], dict[str, Any]]:
    """Parse the literals out of a generated data.js back into Python values."""

    def _parse(source: str) -> dict[str, Any]:
        match = DATA_JS_PATTERN.match(source)
        assert match is not None, f"Unexpected data.js layout:\n{source}"
        return {
            "files": json.loads(match["files"]),
            "captions": json.loads(match["captions"]),
            "title": json.loads(match["title"]),
            "default_caption": json.loads(match["default_caption"]),
            "thumb_size": int(match["thumb_size"]),
        }

    return _parse


@pytest.fixture
def gallery_dir(tmp_path: Path) -> Path:
    """Directory with two images, one non-image and all three caption sources."""
    gallery: Path = tmp_path / "gallery"
    gallery.mkdir()

    (gallery / "a.jpg").write_bytes(b"\xff\xd8\xff")
    (gallery / "b.png").write_bytes(b"\x89PNG")
    (gallery / "c.txt").write_text("not an image")

    (gallery / "captions.yaml").write_text('a.jpg: "T1"\n')
    (gallery / "captions.json").write_text('{"a.jpg": "J1", "b.png": "J2"}')
    (gallery / "b.html").write_text("<p>S2</p>")

    return gallery
