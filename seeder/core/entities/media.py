"""
Media catalog entities.

Records seeded into the catalog tables of the hosted store, one per movie or
series, and the per-table collections they are sent in.
"""

from dataclasses import dataclass, fields
from typing import Any, Mapping, Optional


@dataclass(frozen=True)
class MediaRecord:
    """
    One catalog entry (movie or series).

    Attributes:
        title: Display title
        description: Synopsis
        year: Release (or first air) year
        rating: Average rating
        genre: Ordered genre tags
        tmdb_id: The Movie Database ID, conflict key in the store
        status: Publication status
        poster: Poster image URL
        backdrop: Backdrop image URL
        logo_url: Title logo image URL
        stream_url: Playback URL
    """

    title: str
    description: str
    year: int
    rating: float
    tmdb_id: int
    genre: tuple[str, ...] = ()
    status: str = "published"
    poster: Optional[str] = None
    backdrop: Optional[str] = None
    logo_url: Optional[str] = None
    stream_url: Optional[str] = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "MediaRecord":
        """
        Build a record from a decoded JSON object.

        Raises TypeError on unknown keys or when genre is not a list of strings.
        """
        values = dict(data)
        if "genre" in values:
            genre = values["genre"] if values["genre"] is not None else []
            if not isinstance(genre, (list, tuple)) or not all(
                isinstance(tag, str) for tag in genre
            ):
                raise TypeError(f"genre must be a list of strings, got {genre!r}")
            values["genre"] = tuple(genre)
        return cls(**values)

    def to_payload(self) -> dict[str, Any]:
        """
        JSON-ready mapping.

        Unset optional fields are left out; empty strings are sent as-is.
        """
        payload: dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if value is None:
                continue
            payload[f.name] = list(value) if f.name == "genre" else value
        return payload


@dataclass(frozen=True)
class RecordCollection:
    """Records targeting one table, in send order."""

    table: str
    records: tuple[MediaRecord, ...] = ()

    def __len__(self) -> int:
        return len(self.records)

    def to_payload(self) -> list[dict[str, Any]]:
        return [record.to_payload() for record in self.records]
