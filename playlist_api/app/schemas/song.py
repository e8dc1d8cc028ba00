"""
Pydantic schemas for songs.

A song has a store‑assigned integer ``id`` and three free‑form
fields.  None of the fields is required and their values are stored
as sent: the documentation advertises strings, but a number or any
other JSON value is kept unchanged rather than rejected.  A field
missing from a request body is simply not stored, and it is omitted
again when the song is returned (routes serialise with
``exclude_unset``).

The OpenAPI components are named ``NewSong`` (request body of create
and update) and ``Song`` (every response).
"""

from typing import Any, Dict

from pydantic import BaseModel, Field

_STRING_HINT = {"type": "string"}


class SongBase(BaseModel):
    """Fields shared by every song payload."""

    title: Any = Field(
        None, description="Song title", examples=["Blinding Lights"], json_schema_extra=_STRING_HINT
    )
    artist: Any = Field(
        None, description="Performing artist", examples=["Ahe XD"], json_schema_extra=_STRING_HINT
    )
    duration: Any = Field(
        None,
        description="Free-form duration, e.g. \"3:32\"",
        examples=["3:32"],
        json_schema_extra=_STRING_HINT,
    )

    def supplied_fields(self) -> Dict[str, Any]:
        """Return only the fields present in the incoming payload."""
        return self.model_dump(exclude_unset=True)


class NewSong(SongBase):
    """Body for adding or updating a song.

    Any subset of the fields may be sent, including none.  On update
    only provided values are changed.  An ``id`` in the body is
    ignored because the store assigns it.
    """


class Song(SongBase):
    """Schema for reading a song."""

    id: int = Field(..., description="Identifier assigned by the store")
