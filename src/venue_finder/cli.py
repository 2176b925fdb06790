"""CLI entrypoint for venue-finder."""

from __future__ import annotations

import logging
from typing import Optional

import click
from rich.console import Console
from rich.table import Table

from venue_finder import config
from venue_finder.fixtures import SAMPLE_VENUES
from venue_finder.geo import haversine_km
from venue_finder.loader import load_venues
from venue_finder.models import InvalidInputError, SortKey, Venue, VenueQuery, number_error
from venue_finder.pipeline import filter_by_distance, run_query

console = Console()

_location_options = [
    click.option("--lat", default=config.DEFAULT_LATITUDE, type=float, show_default=True,
                 help="Your latitude."),
    click.option("--lon", default=config.DEFAULT_LONGITUDE, type=float, show_default=True,
                 help="Your longitude."),
    click.option("--max-km", default=config.DEFAULT_MAX_DISTANCE_KM, type=float, show_default=True,
                 help="Search radius in kilometers."),
    click.option("--venues", "venues_file", default=config.VENUES_FILE,
                 type=click.Path(exists=True, dir_okay=False),
                 help="JSON venue list (defaults to the built-in Times Square sample)."),
]


def location_options(func):
    for option in reversed(_location_options):
        func = option(func)
    return func


def _load(venues_file: Optional[str]) -> list[Venue]:
    if not venues_file:
        return list(SAMPLE_VENUES)
    try:
        return load_venues(venues_file)
    except InvalidInputError as exc:
        raise click.ClickException(f"{venues_file}: {exc}") from exc


def _distance_color(km: float, max_km: float) -> str:
    if max_km > 0 and km <= max_km / 3:
        return "green"
    if max_km > 0 and km <= 2 * max_km / 3:
        return "yellow"
    return "red"


def _venue_table(title: str, venues: list[Venue], max_km: float) -> Table:
    table = Table(title=title)
    table.add_column("Name", style="bold")
    table.add_column("Type")
    table.add_column("Distance (km)", justify="right")

    for venue in venues:
        km = venue.distance or 0.0
        table.add_row(
            venue.name,
            venue.type or "-",
            f"[{_distance_color(km, max_km)}]{km:.2f}[/]",
        )
    return table


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Log progress to stderr.")
def cli(verbose: bool):
    """Venue Finder — nearby venues by distance and category."""
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )


@cli.command(context_settings={"ignore_unknown_options": True})
@click.argument("lat1", type=float)
@click.argument("lon1", type=float)
@click.argument("lat2", type=float)
@click.argument("lon2", type=float)
def distance(lat1: float, lon1: float, lat2: float, lon2: float):
    """Great-circle distance in km between two points."""
    points = {"lat1": lat1, "lon1": lon1, "lat2": lat2, "lon2": lon2}
    errors = [e for e in (number_error(v, k) for k, v in points.items()) if e]
    if errors:
        raise click.UsageError(str(InvalidInputError(errors)))
    click.echo(f"{haversine_km(lat1, lon1, lat2, lon2):.2f} km")


@cli.command()
@location_options
def nearby(lat: float, lon: float, max_km: float, venues_file: Optional[str]):
    """List venues within the search radius, closest first."""
    try:
        venues = filter_by_distance(_load(venues_file), lat, lon, max_km)
    except InvalidInputError as exc:
        raise click.UsageError(str(exc)) from exc
    console.print(_venue_table(f"Nearby venues within {max_km:g} km", venues, max_km))


@cli.command()
@location_options
@click.option("--type", "venue_type", default="", help="Only venues of this type (case-insensitive).")
@click.option("--sort", "sort_key", default=SortKey.DISTANCE.value, show_default=True,
              type=click.Choice([k.value for k in SortKey]), help="Sort order.")
def search(lat: float, lon: float, max_km: float, venues_file: Optional[str],
           venue_type: str, sort_key: str):
    """Filter venues by radius and type, then sort."""
    query = VenueQuery(
        latitude=lat,
        longitude=lon,
        max_distance_km=max_km,
        venue_type=venue_type,
        sort_key=SortKey(sort_key),
    )
    try:
        venues = run_query(_load(venues_file), query)
    except InvalidInputError as exc:
        raise click.UsageError(str(exc)) from exc

    if not venues:
        console.print(f"[yellow]No matching venues within {max_km:g} km.[/]")
        return
    title = f"{venue_type or 'All'} venues within {max_km:g} km (by {sort_key})"
    console.print(_venue_table(title, venues, max_km))
