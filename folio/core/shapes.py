from typing import Annotated

from pydantic import (
    AfterValidator,
    BaseModel,
    Field,
    StrictBool,
    StrictInt,
    StrictStr,
    field_serializer,
    field_validator,
)

DEFAULT_FILE_EXTENSIONS = frozenset({"jpg", "jpeg", "png", "gif", "bmp", "webp"})


def _validate_filename(v: str) -> str:
    if not v or "/" in v:
        raise ValueError(f"Invalid gallery filename: {v!r}")
    return v


Filename = Annotated[str, AfterValidator(_validate_filename)]


class GalleryConfig(BaseModel):
    model_config = {"frozen": True, "extra": "ignore"}

    gallery_title: StrictStr | None = None
    thumbnail_size: StrictInt = 100
    file_extensions: frozenset[str] = Field(default=DEFAULT_FILE_EXTENSIONS)
    default_caption: StrictStr | None = None
    pretty_json: StrictBool = False

    @field_validator("file_extensions", mode="before")
    @classmethod
    def normalize_extensions(cls, v):
        if not isinstance(v, (list, tuple, set, frozenset)):
            raise ValueError("file_extensions must be a list of strings")
        normalized = []
        for ext in v:
            if not isinstance(ext, str):
                raise ValueError(f"file extension must be a string, got {ext!r}")
            normalized.append(ext.strip().lower())
        return frozenset(normalized)

    @field_serializer("file_extensions")
    def serialize_extensions(self, v: frozenset[str]) -> list[str]:
        return sorted(v)


class Gallery(BaseModel):
    files: list[Filename] = Field(default_factory=list)
    captions: dict[Filename, str] = Field(default_factory=dict)
    config: GalleryConfig = Field(default_factory=GalleryConfig)
