import threading
from dataclasses import dataclass, field
from typing import Dict, List

from loguru import logger

# Constants
TOP_N = 10
UNDERPLAYED_THRESHOLD = 5
KEY_SEPARATOR = "-"


class CatalogError(Exception):
    """Base class for recoverable catalog errors."""

    message = "Catalog error for song '{name}' by '{artist}'."

    def __init__(self, name: str, artist: str):
        super().__init__(name, artist)
        self.name = name
        self.artist = artist

    def __str__(self) -> str:
        return self.message.format(name=self.name, artist=self.artist)


class SongAlreadyExistsError(CatalogError):
    """Raised when adding a song whose normalized key is already taken."""

    message = "Song '{name}' by '{artist}' already exists."


class SongNotFoundError(CatalogError):
    """Raised when a play is recorded against a song that is not in the catalog."""

    message = "Cannot play. Song '{name}' by '{artist}' not found."


@dataclass
class Song:
    name: str
    artist: str
    total_plays: int = 0
    date_plays: Dict[str, int] = field(default_factory=dict)

    def record_play(self, date: str) -> None:
        """Increment the total play count and the count for a specific date."""
        self.total_plays += 1
        self.date_plays[date] = self.date_plays.get(date, 0) + 1

    def plays_on(self, date: str) -> int:
        return self.date_plays.get(date, 0)

    def copy(self) -> "Song":
        return Song(self.name, self.artist, self.total_plays, dict(self.date_plays))

    def __str__(self) -> str:
        return (
            f"Song{{name='{self.name}', artist='{self.artist}', "
            f"totalPlays={self.total_plays}}}"
        )


def song_key(name: str, artist: str) -> str:
    """Build the case-insensitive catalog key for a (name, artist) pair."""
    return f"{name.lower()}{KEY_SEPARATOR}{artist.lower()}"


class Catalog:
    """In-memory catalog of songs and their per-date play counts.

    Every public method holds a single lock for its whole duration, so readers
    never see a half-applied play. Query results are copies of the stored
    songs. Songs with equal counts keep the order they were added in.
    """

    def __init__(self):
        self._songs: Dict[str, Song] = {}
        self._lock = threading.RLock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._songs)

    def __contains__(self, item) -> bool:
        name, artist = item
        with self._lock:
            return song_key(name, artist) in self._songs

    def add_song(self, name: str, artist: str) -> Song:
        """Add a song with zero plays.

        Raises:
            SongAlreadyExistsError: a song with the same name and artist,
                ignoring case, is already in the catalog.
        """
        key = song_key(name, artist)
        with self._lock:
            if key in self._songs:
                logger.warning(f"Rejected duplicate song: {name!r} by {artist!r}")
                raise SongAlreadyExistsError(name, artist)

            song = Song(name, artist)
            self._songs[key] = song
            logger.debug(f"Added song {key!r}")
            return song.copy()

    def record_play(self, name: str, artist: str, date: str) -> Song:
        """Record one play of a song on ``date``.

        Raises:
            SongNotFoundError: no song matches the name and artist.
        """
        key = song_key(name, artist)
        with self._lock:
            song = self._songs.get(key)
            if song is None:
                logger.warning(f"Rejected play for unknown song: {name!r} by {artist!r}")
                raise SongNotFoundError(name, artist)

            song.record_play(date)
            logger.debug(f"Recorded play of {key!r} on {date} (total {song.total_plays})")
            return song.copy()

    def get_song(self, name: str, artist: str) -> Song:
        with self._lock:
            song = self._songs.get(song_key(name, artist))
            if song is None:
                raise SongNotFoundError(name, artist)
            return song.copy()

    def songs(self) -> List[Song]:
        with self._lock:
            return [song.copy() for song in self._songs.values()]

    def top_overall(self) -> List[Song]:
        """Return up to ten songs, most played first."""
        with self._lock:
            ranked = sorted(
                self._songs.values(), key=lambda s: s.total_plays, reverse=True
            )
            return [song.copy() for song in ranked[:TOP_N]]

    def top_by_artist(self, artist: str) -> List[Song]:
        """Return up to ten songs by ``artist`` (case-insensitive), most played first."""
        wanted = artist.lower()
        with self._lock:
            matching = [s for s in self._songs.values() if s.artist.lower() == wanted]
            ranked = sorted(matching, key=lambda s: s.total_plays, reverse=True)
            return [song.copy() for song in ranked[:TOP_N]]

    def top_by_date(self, date: str) -> List[Song]:
        """Return up to ten songs ranked by their plays on ``date``.

        Songs never played on that date count as zero and still fill the list.
        """
        with self._lock:
            ranked = sorted(
                self._songs.values(), key=lambda s: s.plays_on(date), reverse=True
            )
            return [song.copy() for song in ranked[:TOP_N]]

    def under_played(self, threshold: int = UNDERPLAYED_THRESHOLD) -> List[Song]:
        """Return every song with fewer than ``threshold`` total plays."""
        with self._lock:
            return [
                song.copy()
                for song in self._songs.values()
                if song.total_plays < threshold
            ]
