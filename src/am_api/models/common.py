"""Shared primitive models for Apple Music API responses."""

import re
from datetime import date
from enum import Enum
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, model_validator

from am_api.exceptions import MissingResourceDataError


class AppleMusicModel(BaseModel):
    """Base for all response models."""

    model_config = ConfigDict(populate_by_name=True)


def _parse_hex_color(value: Any) -> Any:
    if isinstance(value, str):
        return int(value, 16)
    return value


HexColor = Annotated[int, BeforeValidator(_parse_hex_color)]


class AudioVariant(str, Enum):
    DOLBY_ATMOS = "dolby-atmos"
    DOLBY_AUDIO = "dolby-audio"
    HI_RES_LOSSLESS = "hi-res-lossless"
    LOSSLESS = "lossless"
    LOSSY_STEREO = "lossy-stereo"


class ContentRating(str, Enum):
    """RIAA rating of the content. Absence means no rating."""

    CLEAN = "clean"
    EXPLICIT = "explicit"


class TrackType(str, Enum):
    LIBRARY_MUSIC_VIDEO = "library-music-videos"
    LIBRARY_SONG = "library-songs"
    MUSIC_VIDEO = "music-videos"
    SONG = "songs"


class ArtworkImageFormat(str, Enum):
    PNG = "png"
    WEBP = "webp"
    JPEG = "jpg"


class PlayParameters(AppleMusicModel):
    """Parameters for playing content."""

    id: str
    kind: str


class EditorialNotes(AppleMusicModel):
    """Editorial notes shown alongside content."""

    name: str | None = None
    short: str | None = None
    standard: str | None = None
    tagline: str | None = None


class DescriptionAttribute(AppleMusicModel):
    short: str | None = None
    standard: str | None = None


class TitleOnlyAttribute(AppleMusicModel):
    """Localized title of a view."""

    title: str | None = None


class Artwork(AppleMusicModel):
    """Album, playlist or artist artwork.

    ``url`` is a template; use ``image_url`` to get a fetchable address.
    """

    width: int | None = None
    height: int | None = None
    url: str | None = None
    bg_color: HexColor | None = Field(None, alias="bgColor")
    text_color1: HexColor | None = Field(None, alias="textColor1")
    text_color2: HexColor | None = Field(None, alias="textColor2")
    text_color3: HexColor | None = Field(None, alias="textColor3")
    text_color4: HexColor | None = Field(None, alias="textColor4")

    def image_url(
        self,
        width: int,
        height: int,
        image_format: ArtworkImageFormat = ArtworkImageFormat.JPEG,
    ) -> str:
        """Render the artwork URL template for a size and image format.

        Args:
            width: Preferred width in pixels
            height: Preferred height in pixels
            image_format: Format the image should be served in

        Returns:
            Image URL
        """
        if self.url is None:
            raise MissingResourceDataError("Artwork has no URL template")
        return (
            self.url.replace("{w}", str(width))
            .replace("{h}", str(height))
            .replace("{f}", ArtworkImageFormat(image_format).value)
        )


class Preview(AppleMusicModel):
    url: str
    hls_url: str | None = Field(None, alias="hlsUrl")
    artwork: Artwork | None = None


_YEAR_PATTERN = re.compile(r"^\d{1,4}$")


class YearOrDate(BaseModel):
    """A release date given either as ``YYYY`` or ``YYYY-MM-DD``."""

    model_config = ConfigDict(frozen=True)

    year: int
    month: int | None = None
    day: int | None = None

    @model_validator(mode="before")
    @classmethod
    def parse_string(cls, value: Any) -> Any:
        if isinstance(value, int):
            return {"year": value}
        if isinstance(value, date):
            return {"year": value.year, "month": value.month, "day": value.day}
        if isinstance(value, str):
            if "-" not in value:
                if not _YEAR_PATTERN.match(value):
                    raise ValueError(f"Invalid year: {value!r}")
                return {"year": int(value)}
            parsed = date.fromisoformat(value)
            return {"year": parsed.year, "month": parsed.month, "day": parsed.day}
        return value

    def to_date(self) -> date | None:
        """Full date, or None when only the year is known."""
        if self.month is None or self.day is None:
            return None
        return date(self.year, self.month, self.day)

    def __str__(self) -> str:
        full = self.to_date()
        return full.isoformat() if full else f"{self.year:04d}"


class MusicError(AppleMusicModel):
    """A single error entry in an error response."""

    id: str | None = None
    title: str | None = None
    detail: str | None = None
    status: str | None = None
    code: str | None = None


class ErrorResponse(AppleMusicModel):
    """Error body returned with non-success responses."""

    code: int | None = None
    message: str | None = None
    errors: list[MusicError] = Field(default_factory=list)

    def summary(self) -> str:
        """One-line description of the errors."""
        if self.errors:
            return "; ".join(
                e.detail or e.title or e.code or "unknown error" for e in self.errors
            )
        return self.message or "unknown error"
