"""CLI interface using typer + rich."""

from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markdown import Markdown
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from resume_insights.clients.llm_client import LLMClient
from resume_insights.config import AppConfig, load_config
from resume_insights.errors import ResumeInsightsError, ValidationError
from resume_insights.models.analysis import AnalysisResult
from resume_insights.models.generation import Tone
from resume_insights.parsers.jd_parser import load_jd_file
from resume_insights.parsers.resume_parser import to_data_uri
from resume_insights.pipeline.actions import ResumeInsights
from resume_insights.storage.record_store import ANALYSES, GENERATIONS, RecordStore

app = typer.Typer(
    name="resume-insights",
    help="AI resume analysis and generation",
    no_args_is_help=True,
)
console = Console()

KINDS = {"analyses": ANALYSES, "generations": GENERATIONS}


@app.callback()
def main(
    ctx: typer.Context,
    config: Path = typer.Option(None, "--config", "-c", help="Path to config.yaml"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )
    ctx.obj = load_config(config)


def _service(config: AppConfig) -> ResumeInsights:
    llm = LLMClient(timeout=config.llm.timeout, max_attempts=config.llm.max_retries)
    store = RecordStore(db_path=config.storage.resolved_db_path)
    return ResumeInsights(llm, store, config)


def _fail(error: ResumeInsightsError) -> None:
    if isinstance(error, ValidationError):
        for field_error in error.field_errors:
            console.print(f"[red]- {field_error.field}: {field_error.message}[/red]")
    else:
        console.print(f"[red]{error.message}[/red]")
    raise typer.Exit(1)


@app.command()
def analyze(
    ctx: typer.Context,
    resume: Path = typer.Argument(help="Resume file (PDF/DOCX/TXT/MD)"),
    jd: Path = typer.Option(..., "--jd", help="Job description file"),
    as_json: bool = typer.Option(False, "--json", help="Print the raw result as JSON"),
) -> None:
    """Score a resume against a job description and extract its entities."""
    config: AppConfig = ctx.obj
    for path, label in ((resume, "Resume"), (jd, "Job description")):
        if not path.exists():
            console.print(f"[red]{label} file not found: {path}[/red]")
            raise typer.Exit(1)

    try:
        raw = {"resumeDataUri": to_data_uri(resume), "jobDescription": _read_jd(jd)}
        with Progress(SpinnerColumn(), TextColumn("{task.description}"), console=console) as progress:
            progress.add_task("Analyzing resume...", total=None)
            result = asyncio.run(_service(config).analyze(raw))
    except ResumeInsightsError as e:
        _fail(e)

    if as_json:
        console.print_json(result.model_dump_json(by_alias=True))
        return
    _print_analysis(result)


@app.command()
def generate(
    ctx: typer.Context,
    name: str = typer.Option(..., "--name", help="Full name"),
    contact: str = typer.Option(..., "--contact", help="Email, phone, LinkedIn, ..."),
    skills: str = typer.Option(..., "--skills", help="Skills, comma separated"),
    experience: str = typer.Option(..., "--experience", help="Work experience"),
    education: str = typer.Option(..., "--education", help="Education"),
    jd: Path = typer.Option(None, "--jd", help="Job description file to tailor towards"),
    tone: str = typer.Option(Tone.PROFESSIONAL.value, "--tone", "-t", help="professional, creative or technical"),
    output: Path = typer.Option(None, "--output", "-o", help="Write the Markdown resume to a file"),
) -> None:
    """Generate a Markdown resume from your details."""
    config: AppConfig = ctx.obj
    raw = {
        "fullName": name,
        "contactInfo": contact,
        "skills": skills,
        "experience": experience,
        "education": education,
        "tone": tone,
    }
    if jd is not None and not jd.exists():
        console.print(f"[red]Job description file not found: {jd}[/red]")
        raise typer.Exit(1)

    try:
        if jd is not None:
            raw["targetJobDescription"] = _read_jd(jd)
        with Progress(SpinnerColumn(), TextColumn("{task.description}"), console=console) as progress:
            progress.add_task("Generating resume...", total=None)
            result = asyncio.run(_service(config).generate(raw))
    except ResumeInsightsError as e:
        _fail(e)

    if output is not None:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(result.resume_text, encoding="utf-8")
        console.print(f"[green]Resume saved: {output}[/green]")
    else:
        console.print(Markdown(result.resume_text))

    if result.generation_id is None:
        console.print("[yellow]Warning: the generated resume could not be saved to history.[/yellow]")
    else:
        console.print(f"[dim]Generation ID: {result.generation_id}[/dim]")


@app.command()
def history(
    ctx: typer.Context,
    kind: str = typer.Option("analyses", "--kind", "-k", help="analyses or generations"),
    limit: int = typer.Option(20, "--limit", "-n", help="Number of records"),
) -> None:
    """List saved analyses or generated resumes."""
    collection = _collection(kind)
    store = RecordStore(db_path=ctx.obj.storage.resolved_db_path)
    records = store.list_records(collection, limit=limit)
    if not records:
        console.print("[dim]No records yet.[/dim]")
        return

    table = Table(title=f"Saved {kind}")
    table.add_column("ID", style="cyan")
    table.add_column("Created")
    table.add_column("Summary")
    for record in records:
        if collection == ANALYSES:
            score = record.payload.get("scoring", {}).get("fitScore", 0.0)
            summary = f"fit {score:.0%}"
        else:
            summary = record.payload.get("input", {}).get("fullName", "")
        table.add_row(record.id, record.created_at.strftime("%Y-%m-%d %H:%M"), summary)
    console.print(table)


@app.command()
def show(
    ctx: typer.Context,
    record_id: str = typer.Argument(help="Record ID from `history`"),
    kind: str = typer.Option("analyses", "--kind", "-k", help="analyses or generations"),
) -> None:
    """Print one saved record as JSON."""
    store = RecordStore(db_path=ctx.obj.storage.resolved_db_path)
    record = store.get(_collection(kind), record_id)
    if record is None:
        console.print(f"[red]No {kind} record with ID {record_id}[/red]")
        raise typer.Exit(1)
    console.print_json(json.dumps(record.payload, ensure_ascii=False))


def _read_jd(path: Path) -> str:
    try:
        return load_jd_file(path)
    except UnicodeDecodeError:
        console.print(f"[red]Job description file is not UTF-8 text: {path}[/red]")
        raise typer.Exit(1)


def _collection(kind: str) -> str:
    if kind not in KINDS:
        console.print(f"[red]--kind must be one of: {', '.join(KINDS)}[/red]")
        raise typer.Exit(1)
    return KINDS[kind]


def _print_analysis(result: AnalysisResult) -> None:
    scoring = result.scoring
    color = "green" if scoring.fit_score >= 0.7 else "yellow" if scoring.fit_score >= 0.4 else "red"
    console.print(
        Panel(
            f"[bold {color}]Fit score: {scoring.fit_score:.0%}[/bold {color}]\n\n{scoring.justification}",
            title="Job fit",
        )
    )
    if scoring.suggested_roles:
        console.print(Panel("\n".join(f"- {r}" for r in scoring.suggested_roles), title="Suggested roles"))
    if scoring.improvement_suggestions:
        console.print(
            Panel("\n".join(f"- {s}" for s in scoring.improvement_suggestions), title="Improvement tips")
        )

    entities = result.entities
    for title, items in (
        ("Skills", entities.skills),
        ("Experience", entities.experience),
        ("Education", entities.education),
    ):
        body = "\n".join(f"- {item}" for item in items) if items else "[dim]None found[/dim]"
        console.print(Panel(body, title=title))

    if result.analysis_id is None:
        console.print("[yellow]Warning: the analysis could not be saved to history.[/yellow]")
    else:
        console.print(f"[dim]Analysis ID: {result.analysis_id}[/dim]")


if __name__ == "__main__":
    app()
