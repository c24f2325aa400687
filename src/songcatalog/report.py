from typing import Iterable

import typer

from .catalog import TOP_N, UNDERPLAYED_THRESHOLD, Catalog, Song


def format_section(title: str, songs: Iterable[Song]) -> str:
    lines = [f"=== {title} ==="]
    lines.extend(str(song) for song in songs)
    return "\n".join(lines)


def print_report(
    catalog: Catalog,
    artist: str,
    date: str,
    threshold: int = UNDERPLAYED_THRESHOLD,
) -> None:
    """Write the overall, artist, date and under-played rankings to stdout."""
    sections = [
        format_section(f"Top {TOP_N} Songs Overall", catalog.top_overall()),
        format_section(f"Top {TOP_N} Songs for {artist}", catalog.top_by_artist(artist)),
        format_section(f"Top {TOP_N} Songs for {date}", catalog.top_by_date(date)),
        format_section(
            f"Songs played less than {threshold} times (overall)",
            catalog.under_played(threshold),
        ),
    ]
    typer.echo("\n\n".join(sections))
