from loguru import logger

from .catalog import Catalog

SAMPLE_SONGS = [
    ("Let It Be", "The Beatles"),
    ("Yesterday", "The Beatles"),
    ("Shape of You", "Ed Sheeran"),
    ("Blinding Lights", "The Weeknd"),
    ("Despacito", "Luis Fonsi"),
    ("Believer", "Imagine Dragons"),
]

# "Believer" is never played
SAMPLE_PLAYS = [
    ("Let It Be", "The Beatles", "2025-01-01"),
    ("Let It Be", "The Beatles", "2025-01-01"),
    ("Let It Be", "The Beatles", "2025-01-02"),
    ("Yesterday", "The Beatles", "2025-01-01"),
    ("Yesterday", "The Beatles", "2025-01-02"),
    ("Yesterday", "The Beatles", "2025-01-02"),
    ("Shape of You", "Ed Sheeran", "2025-01-02"),
    ("Shape of You", "Ed Sheeran", "2025-01-03"),
    ("Shape of You", "Ed Sheeran", "2025-01-04"),
    ("Shape of You", "Ed Sheeran", "2025-01-05"),
    ("Blinding Lights", "The Weeknd", "2025-01-02"),
    ("Despacito", "Luis Fonsi", "2025-01-02"),
]


def seed_catalog(catalog: Catalog, with_plays: bool = True) -> Catalog:
    """Load the sample songs (and optionally their plays) into ``catalog``."""
    for name, artist in SAMPLE_SONGS:
        catalog.add_song(name, artist)

    if with_plays:
        for name, artist, date in SAMPLE_PLAYS:
            catalog.record_play(name, artist, date)

    logger.info(
        f"Seeded {len(SAMPLE_SONGS)} songs"
        + (f" and {len(SAMPLE_PLAYS)} plays" if with_plays else "")
    )
    return catalog
