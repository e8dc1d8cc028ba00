"""
Song endpoints.

These routes expose the playlist held by the application's
``SongStore``: list every song, add one, search by title or artist,
update one in place and delete one.  Update and delete answer with a
plain‑text 404 when the id is unknown (see the exception handler
registered in ``main``).

Ids in the path are read like an integer prefix, so ``/songs/3abc``
targets song 3 and ``/songs/abc`` targets nothing and yields 404
rather than a validation error.
"""

import re
from typing import List, Optional

from fastapi import APIRouter, Body, Depends, Path, Query, Request, status

from playlist_api.app.schemas.song import NewSong, Song
from playlist_api.app.services.song_service import SongRecord, SongStore

router = APIRouter()

# ASCII digits only; hex prefixes such as "0x3" are not recognised.
_LEADING_INT = re.compile(r"^\s*([+-]?[0-9]+)")

_NOT_FOUND_RESPONSE = {
    status.HTTP_404_NOT_FOUND: {
        "description": "Song not found",
        "content": {"text/plain": {"schema": {"type": "string"}, "example": "Song not found"}},
    }
}


def parse_song_id(raw: str) -> Optional[int]:
    """Return the leading integer of ``raw`` or ``None`` if there is none."""
    match = _LEADING_INT.match(raw)
    return int(match.group(1)) if match else None


def get_song_store(request: Request) -> SongStore:
    """Dependency returning the store owned by the running application."""
    return request.app.state.song_store


@router.get(
    "",
    response_model=List[Song],
    response_model_exclude_unset=True,
    summary="List every song in the playlist",
)
async def list_songs(store: SongStore = Depends(get_song_store)) -> List[SongRecord]:
    """Return the whole playlist in its current order."""
    return store.list_songs()


@router.post(
    "",
    response_model=Song,
    response_model_exclude_unset=True,
    status_code=status.HTTP_201_CREATED,
    summary="Add a new song",
)
async def create_song(
    song_in: Optional[NewSong] = Body(None),
    store: SongStore = Depends(get_song_store),
) -> SongRecord:
    """Append a song; the response includes the assigned id.

    A request without a body creates a song holding only its id.
    """
    return store.create_song(song_in.supplied_fields() if song_in is not None else {})


@router.get(
    "/search",
    response_model=List[Song],
    response_model_exclude_unset=True,
    summary="Search songs by title or artist",
)
async def search_songs(
    q: str = Query("", description="Text to look for in the song title or artist"),
    store: SongStore = Depends(get_song_store),
) -> List[SongRecord]:
    """Case‑insensitive substring search; an empty ``q`` returns every song."""
    return store.search_songs(q)


@router.put(
    "/{song_id}",
    response_model=Song,
    response_model_exclude_unset=True,
    responses=_NOT_FOUND_RESPONSE,
    summary="Update a song",
)
async def update_song(
    song_id: str = Path(..., description="Id of the song to update"),
    song_in: Optional[NewSong] = Body(None),
    store: SongStore = Depends(get_song_store),
) -> SongRecord:
    """Overwrite the supplied fields of a song and keep the rest."""
    return store.update_song(parse_song_id(song_id), song_in.supplied_fields() if song_in is not None else {})


@router.delete(
    "/{song_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses=_NOT_FOUND_RESPONSE,
    summary="Delete a song",
)
async def delete_song(
    song_id: str = Path(..., description="Id of the song to delete"),
    store: SongStore = Depends(get_song_store),
) -> None:
    """Remove a song; answers 204 with an empty body."""
    store.delete_song(parse_song_id(song_id))
    return None
