import os
import sys

# Ensure src/songcatalog is on sys.path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "../src")))
from songcatalog import report
from songcatalog.catalog import Catalog, Song
from songcatalog.sample_data import SAMPLE_PLAYS, SAMPLE_SONGS, seed_catalog


def test_format_section():
    text = report.format_section("Top 10 Songs Overall", [Song("Believer", "Imagine Dragons")])
    assert text.splitlines() == [
        "=== Top 10 Songs Overall ===",
        "Song{name='Believer', artist='Imagine Dragons', totalPlays=0}",
    ]


def test_format_section_empty():
    assert report.format_section("Nothing", []) == "=== Nothing ==="


def test_seed_catalog():
    catalog = seed_catalog(Catalog())
    assert len(catalog) == len(SAMPLE_SONGS)
    assert sum(s.total_plays for s in catalog.songs()) == len(SAMPLE_PLAYS)
    assert catalog.get_song("Shape of You", "Ed Sheeran").total_plays == 4
    assert catalog.get_song("Believer", "Imagine Dragons").total_plays == 0


def test_print_report(capsys):
    catalog = seed_catalog(Catalog())

    report.print_report(catalog, artist="The Beatles", date="2025-01-01")

    out = capsys.readouterr().out
    sections = out.strip().split("\n\n")
    assert [s.splitlines()[0] for s in sections] == [
        "=== Top 10 Songs Overall ===",
        "=== Top 10 Songs for The Beatles ===",
        "=== Top 10 Songs for 2025-01-01 ===",
        "=== Songs played less than 5 times (overall) ===",
    ]
    overall = sections[0].splitlines()[1:]
    assert overall[0] == "Song{name='Shape of You', artist='Ed Sheeran', totalPlays=4}"
    assert len(overall) == 6
    by_date = sections[2].splitlines()[1:]
    assert by_date[0] == "Song{name='Let It Be', artist='The Beatles', totalPlays=3}"
    assert by_date[1] == "Song{name='Yesterday', artist='The Beatles', totalPlays=3}"
    assert len(sections[3].splitlines()) == 1 + 6
