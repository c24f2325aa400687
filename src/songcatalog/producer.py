import random
import time
from datetime import date as _date
from typing import Any, Dict, List, Optional, Sequence

from loguru import logger

from .catalog import Catalog, Song, SongNotFoundError


def generate_random_play(
    songs: Sequence[Song], dates: Optional[Sequence[str]] = None
) -> Dict[str, Any]:
    """Generate a random play event for one of ``songs``."""
    song = random.choice(songs)
    return {
        "name": song.name,
        "artist": song.artist,
        "date": random.choice(dates) if dates else _date.today().isoformat(),
    }


def run_producer(
    catalog: Catalog,
    rate: int,
    total: int,
    duration: Optional[int] = None,
    dates: Optional[List[str]] = None,
) -> int:
    """Record random plays of the catalog's songs.

    Args:
        catalog: Catalog to record plays into
        rate: Plays per second
        total: Total plays to record (if duration is None)
        duration: Duration in seconds (if provided, overrides total)
        dates: Dates to pick from (defaults to today)

    Returns:
        Number of plays recorded

    Raises:
        ValueError: rate is not positive
    """
    if rate <= 0:
        raise ValueError(f"rate must be positive, got {rate}")

    logger.info(f"Starting producer: {rate} plays/sec")
    if duration:
        logger.info(f"Duration: {duration} seconds")
    else:
        logger.info(f"Total plays: {total}")

    songs = catalog.songs()
    if not songs:
        logger.warning("Catalog is empty, nothing to play")
        return 0

    play_count = 0

    def play_once() -> None:
        nonlocal play_count
        play = generate_random_play(songs, dates)
        try:
            catalog.record_play(play["name"], play["artist"], play["date"])
        except SongNotFoundError as e:
            logger.error(f"❌ {e}")
            return
        play_count += 1
        logger.info(f"Recorded play {play_count}: {play}")

    try:
        if duration:
            # Run for specified duration
            start_time = time.time()
            while time.time() - start_time < duration:
                play_once()
                time.sleep(1.0 / rate)
        else:
            # Run for specified number of plays
            for i in range(total):
                play_once()

                if i < total - 1:  # Don't sleep after the last play
                    time.sleep(1.0 / rate)

    except KeyboardInterrupt:
        logger.warning("Producer interrupted by user")
    finally:
        logger.info(f"Producer stopped after {play_count} plays")

    return play_count
