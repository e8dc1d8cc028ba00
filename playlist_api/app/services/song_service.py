"""
Service layer for the playlist.

``SongStore`` owns the ordered list of songs together with the id
counter.  Songs are plain dictionaries so that fields a client never
sent stay absent instead of being defaulted.  The store is created
once per application (see ``main.create_app``) which keeps tests
isolated: each test builds its own store.

Ids are assigned from a counter that only ever grows, so an id is
never reused even after the song holding it is deleted.  Update and
delete locate songs by a linear scan and act on the first match.

Every read‑modify‑write sequence runs under a lock so the store
stays consistent when it is shared between threads (for example a
synchronous caller next to the running application).
"""

from __future__ import annotations

import copy
import logging
import threading
from typing import Any, Dict, Iterable, List, Mapping, Optional

logger = logging.getLogger(__name__)

SongRecord = Dict[str, Any]

DEFAULT_SONGS: List[SongRecord] = [
    {"id": 1, "title": "Blinding Lights", "artist": "Ahe XD", "duration": "3:32"},
    {"id": 2, "title": "Levitating", "artist": "Dua Aua", "duration": "3:40"},
    {"id": 3, "title": "Watermelon Sugar", "artist": "Ave Ado", "duration": "3:34"},
    {"id": 4, "title": "Save Your Tears", "artist": "Ahe XD", "duration": "4:06"},
    {"id": 5, "title": "Peaches", "artist": "Justin", "duration": "3:35"},
]


class SongNotFoundError(LookupError):
    """Raised when an update or delete targets an id that is not stored."""

    def __init__(self, song_id: Optional[int]) -> None:
        self.song_id = song_id
        super().__init__("Song not found")


def merge_song(existing: Mapping[str, Any], fields: Mapping[str, Any]) -> SongRecord:
    """Shallow‑merge ``fields`` over ``existing``.

    Present fields overwrite, absent fields are retained and the id of
    ``existing`` is always kept.
    """
    merged = dict(existing)
    merged.update({key: value for key, value in fields.items() if key != "id"})
    if "id" in existing:
        merged["id"] = existing["id"]
    return merged


def _text(value: Any) -> str:
    # Values are stored as sent, so they need not be strings.
    return "" if value is None else str(value).lower()


def _matches(song: Mapping[str, Any], needle: str) -> bool:
    return needle in _text(song.get("title")) or needle in _text(song.get("artist"))


class SongStore:
    """In‑memory, ordered collection of songs."""

    def __init__(self, seed: Optional[Iterable[Mapping[str, Any]]] = None) -> None:
        self._lock = threading.Lock()
        self._songs: List[SongRecord] = [dict(song) for song in (seed or [])]
        highest = max((song["id"] for song in self._songs), default=0)
        self._next_id = highest + 1

    @classmethod
    def with_defaults(cls) -> "SongStore":
        """Return a store holding the demo playlist (ids 1‑5)."""
        return cls(copy.deepcopy(DEFAULT_SONGS))

    @property
    def next_id(self) -> int:
        return self._next_id

    def __len__(self) -> int:
        return len(self._songs)

    def list_songs(self) -> List[SongRecord]:
        """Return every song in playlist order."""
        with self._lock:
            return [dict(song) for song in self._songs]

    def get_song(self, song_id: Optional[int]) -> Optional[SongRecord]:
        """Return the first song with ``song_id`` or ``None``."""
        with self._lock:
            index = self._find_index(song_id)
            return dict(self._songs[index]) if index is not None else None

    def create_song(self, fields: Mapping[str, Any]) -> SongRecord:
        """Append a song built from ``fields`` and return it.

        No field is required.  Any ``id`` in ``fields`` is discarded in
        favour of the next counter value.
        """
        with self._lock:
            song_id = self._next_id
            self._next_id += 1
            song = merge_song({"id": song_id}, fields)
            self._songs.append(song)
        logger.info("Created song %s", song_id)
        return dict(song)

    def search_songs(self, query: Optional[str] = "") -> List[SongRecord]:
        """Return songs whose title or artist contains ``query``.

        Matching is a case‑insensitive substring test, so an empty
        query returns the whole playlist.
        """
        needle = (query or "").lower()
        with self._lock:
            return [dict(song) for song in self._songs if _matches(song, needle)]

    def update_song(self, song_id: Optional[int], fields: Mapping[str, Any]) -> SongRecord:
        """Merge ``fields`` into the song with ``song_id`` in place.

        Raises
        ------
        SongNotFoundError
            If no song has ``song_id``.
        """
        with self._lock:
            index = self._find_index(song_id)
            if index is None:
                logger.warning("Update failed, song %s not found", song_id)
                raise SongNotFoundError(song_id)
            updated = merge_song(self._songs[index], fields)
            self._songs[index] = updated
        logger.info("Updated song %s", song_id)
        return dict(updated)

    def delete_song(self, song_id: Optional[int]) -> None:
        """Remove the song with ``song_id``.

        Raises
        ------
        SongNotFoundError
            If no song has ``song_id``.
        """
        with self._lock:
            index = self._find_index(song_id)
            if index is None:
                logger.warning("Delete failed, song %s not found", song_id)
                raise SongNotFoundError(song_id)
            del self._songs[index]
        logger.info("Deleted song %s", song_id)

    def _find_index(self, song_id: Optional[int]) -> Optional[int]:
        # Caller must hold the lock.
        if song_id is None:
            return None
        for index, song in enumerate(self._songs):
            if song.get("id") == song_id:
                return index
        return None
