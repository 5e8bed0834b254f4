"""
TalentMatch Command Line Interface

Provides CLI commands for ranking candidate pools against a job requirement
and for inspecting the fuzzy-match and distance utilities.
"""

import json
from pathlib import Path
from typing import Any, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

app = typer.Typer(
    name="talentmatch",
    help="Candidate-to-job matching CLI",
    add_completion=False,
)
console = Console()


def _load_json(path: Path) -> Any:
    """Read a JSON file, exiting with an error message on failure."""
    if not path.exists():
        console.print(f"[red]Error: Path does not exist: {path}[/red]")
        raise typer.Exit(1)
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        console.print(f"[red]Error: Invalid JSON in {path}: {escape(str(e))}[/red]")
        raise typer.Exit(1)


@app.command()
def version():
    """Show application version."""
    from talentmatch import __version__, __app_name__

    console.print(f"[bold blue]{__app_name__}[/bold blue] version [green]{__version__}[/green]")


@app.command()
def info():
    """Show the effective configuration."""
    from talentmatch.utils.config import get_settings

    settings = get_settings()
    matching = settings.matching

    table = Table(title="TalentMatch Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("Environment", settings.environment)
    table.add_row("Debug Mode", str(settings.debug))
    table.add_row("Fuzzy Threshold", f"{matching.fuzzy_threshold:.2f}")
    table.add_row("Default Max Distance", f"{matching.default_max_distance:.0f} miles")
    table.add_row("Skills Weight", f"{matching.skills_weight:.2f}")
    table.add_row("Education Weight", f"{matching.education_weight:.2f}")
    table.add_row("Min Percentage", f"{matching.min_percentage:.1f}%")
    table.add_row("Workers", str(matching.max_workers))
    table.add_row("Log Level", settings.logging.level)

    console.print(table)


@app.command()
def match(
    job_file: Path = typer.Argument(..., help="JSON file with the job requirement"),
    candidates_file: Path = typer.Argument(..., help="JSON file with a list of candidate records"),
    min_percentage: Optional[float] = typer.Option(
        None, "--min-percentage", "-m", help="Minimum match percentage (defaults to MATCH_MIN_PERCENTAGE)"
    ),
    top_n: int = typer.Option(10, "--top", "-n", min=1, help="Number of top matches to show"),
    max_distance: Optional[float] = typer.Option(
        None, "--max-distance", "-d", help="Override the job's search radius in miles"
    ),
    workers: Optional[int] = typer.Option(None, "--workers", "-w", help="Evaluate candidates in parallel"),
    as_json: bool = typer.Option(False, "--json", help="Print results as JSON"),
):
    """Rank candidates from a JSON file against a job requirement."""
    from talentmatch.core.matching import MatchRanker
    from talentmatch.data import (
        InvalidRequirementError,
        normalize_candidates,
        normalize_requirement,
    )
    from talentmatch.utils.config import get_settings
    from talentmatch.utils.constants import AuditAction
    from talentmatch.utils.logger import audit_log, setup_logging

    setup_logging()
    settings = get_settings()
    matching = settings.matching

    job_record = _load_json(job_file)
    candidate_records = _load_json(candidates_file)

    if isinstance(job_record, dict) and max_distance is not None:
        job_record = {**job_record, "maxDistance": max_distance}

    try:
        requirement = normalize_requirement(job_record, default_max_distance=matching.default_max_distance)
    except InvalidRequirementError as e:
        audit_log(AuditAction.REQUIREMENT_REJECTED.value, {"problems": e.problems}, audit_type="INPUT")
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    if not isinstance(candidate_records, list):
        console.print("[red]Error: Candidates file must contain a JSON list[/red]")
        raise typer.Exit(1)

    candidates = normalize_candidates(candidate_records)
    cutoff = matching.min_percentage if min_percentage is None else min_percentage

    if workers is not None:
        matching = matching.model_copy(update={"max_workers": max(1, workers)})
    ranker = MatchRanker.from_settings(matching)

    try:
        summary = ranker.rank_with_summary(requirement, candidates, cutoff)
    except ValueError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    results = summary.results[:top_n]

    if as_json:
        payload = {
            "job_title": requirement.title,
            "min_percentage": cutoff,
            "evaluated": summary.evaluated,
            "matches": [r.to_display_dict() for r in results],
        }
        typer.echo(json.dumps(payload, indent=2))
        return

    console.print(f"[yellow]Matching candidates for: [cyan]{requirement.title}[/cyan][/yellow]")
    console.print(
        f"  Evaluated [cyan]{summary.evaluated}[/cyan] candidate(s), "
        f"[cyan]{summary.eligible}[/cyan] eligible"
    )
    for reason, count in sorted(summary.exclusions.items(), key=lambda kv: kv[0].value):
        console.print(f"  [dim]{reason.value}: {count}[/dim]")

    if not results:
        console.print("[yellow]No candidates matched the threshold.[/yellow]")
        raise typer.Exit(0)

    table = Table(title=f"Top {len(results)} Matches for {requirement.title}")
    table.add_column("Rank", style="dim", width=4)
    table.add_column("Candidate", style="cyan")
    table.add_column("Match", justify="right")
    table.add_column("Level", justify="center")
    table.add_column("Skills", justify="right")
    table.add_column("Distance", justify="right")
    table.add_column("Min Salary", justify="right")

    level_colors = {"excellent": "green", "good": "blue", "fair": "yellow", "poor": "red"}

    for i, result in enumerate(results, 1):
        level = result.score_level.value
        color = level_colors[level]
        total_skills = len(result.matched_skills) + len(result.missing_skills)
        salary = f"{result.salary_floor:,.0f}" if result.salary_floor is not None else "N/A"
        table.add_row(
            str(i),
            result.candidate_name,
            f"{result.match_percentage:.1f}%",
            f"[{color}]{level.upper()}[/{color}]",
            f"{len(result.matched_skills)}/{total_skills}",
            f"{result.distance_miles:.2f} mi / {result.distance_km:.2f} km",
            salary,
        )

    console.print(table)


@app.command()
def fuzzy(
    a: str = typer.Argument(..., help="First string"),
    b: str = typer.Argument(..., help="Second string"),
    threshold: Optional[float] = typer.Option(None, "--threshold", "-t", help="Similarity threshold"),
):
    """Compare two strings with the fuzzy matcher."""
    from talentmatch.core.matching import edit_distance, fuzzy_match, similarity_ratio
    from talentmatch.utils.config import get_settings

    if threshold is None:
        threshold = get_settings().matching.fuzzy_threshold

    matched = fuzzy_match(a, b, threshold)
    console.print(f"  Edit distance: [cyan]{edit_distance(a.lower(), b.lower())}[/cyan]")
    console.print(f"  Similarity: [cyan]{similarity_ratio(a, b):.2f}[/cyan] (threshold {threshold:.2f})")
    if matched:
        console.print("  [green]✓ Match[/green]")
    else:
        console.print("  [red]✗ No match[/red]")


@app.command()
def distance(
    lat1: float = typer.Argument(..., min=-90, max=90),
    lng1: float = typer.Argument(..., min=-180, max=180),
    lat2: float = typer.Argument(..., min=-90, max=90),
    lng2: float = typer.Argument(..., min=-180, max=180),
):
    """Great-circle distance between two points."""
    from talentmatch.core.matching import haversine_distance, miles_to_km

    miles = haversine_distance((lat1, lng1), (lat2, lng2))
    console.print(f"{miles:.2f} miles = {miles_to_km(miles):.2f} km")


if __name__ == "__main__":
    app()
