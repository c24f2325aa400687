import threading
from datetime import date as _date
from typing import Optional

import typer
from loguru import logger

from .catalog import UNDERPLAYED_THRESHOLD, Catalog, CatalogError
from .producer import run_producer
from .report import print_report
from .sample_data import seed_catalog

app = typer.Typer()


def report_error(error: CatalogError) -> None:
    logger.error(f"❌ {error}")
    typer.echo(f"Exception: {error}", err=True)


@app.command()
def demo(
    artist: str = typer.Option(
        "The Beatles", envvar="SONGCATALOG_ARTIST", help="Artist to rank"
    ),
    date: str = typer.Option(
        "2025-01-01", envvar="SONGCATALOG_DATE", help="Date to rank (YYYY-MM-DD)"
    ),
    threshold: int = typer.Option(
        UNDERPLAYED_THRESHOLD,
        min=0,
        envvar="SONGCATALOG_THRESHOLD",
        help="Songs with fewer total plays are listed as under-played",
    ),
):
    """Seed the sample catalog, print its rankings and show both error cases."""
    logger.info("Starting SongCatalog demo")
    catalog = seed_catalog(Catalog())

    print_report(catalog, artist=artist, date=date, threshold=threshold)

    # Trying to add a duplicate song
    try:
        catalog.add_song("Let It Be", "The Beatles")
    except CatalogError as e:
        report_error(e)

    # Playing a song that was never added
    try:
        catalog.record_play("Non Existent Song", "Unknown Artist", date)
    except CatalogError as e:
        report_error(e)

    logger.success("Demo completed!")


@app.command()
def simulate(
    rate: int = typer.Option(
        5, min=1, envvar="SONGCATALOG_RATE", help="Plays per second"
    ),
    total: int = typer.Option(
        50, min=0, envvar="SONGCATALOG_TOTAL", help="Total plays to record"
    ),
    duration: Optional[int] = typer.Option(
        None, min=1, help="Run for this many seconds instead of --total plays"
    ),
    interval: float = typer.Option(
        1.0, min=0.1, help="Seconds between leaderboard updates"
    ),
    artist: str = typer.Option(
        "The Beatles", envvar="SONGCATALOG_ARTIST", help="Artist to rank"
    ),
    threshold: int = typer.Option(
        UNDERPLAYED_THRESHOLD,
        min=0,
        envvar="SONGCATALOG_THRESHOLD",
        help="Songs with fewer total plays are listed as under-played",
    ),
):
    """Record random plays in a background thread while watching the leaders."""
    catalog = seed_catalog(Catalog(), with_plays=False)
    today = _date.today().isoformat()

    # Start producer in background thread
    def run_producer_thread():
        run_producer(catalog, rate=rate, total=total, duration=duration)

    producer_thread = threading.Thread(target=run_producer_thread, daemon=True)
    producer_thread.start()

    try:
        while producer_thread.is_alive():
            producer_thread.join(interval)
            leaders = catalog.top_overall()
            if leaders:
                logger.info(f"Current leader: {leaders[0]}")
    except KeyboardInterrupt:
        logger.warning("Simulation interrupted by user")
        return

    print_report(catalog, artist=artist, date=today, threshold=threshold)
    logger.success("Simulation completed!")


if __name__ == "__main__":
    app()
