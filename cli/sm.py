#!/usr/bin/env python
"""SkillMatch Typer-based CLI.

Provides:
  - Config precedence & JSON Schema validation
  - Resume parsing and heuristic analysis
  - Job description matching with local history
  - Catalog job suggestions
  - Demo-mode authentication
  - Global --seed for reproducible random draws and --offline to skip the backend
"""
from __future__ import annotations
import asyncio
import json
import logging
import contextvars
import random
from pathlib import Path
from typing import Optional, Any, Dict, List

import typer
from rich.console import Console
from rich.table import Table

from skillmatch.app import AppServices, create_app_services
from skillmatch.config import AppConfig, ConfigError, load_config, validate_config
from skillmatch.errors import SkillMatchError
from skillmatch.jobs import SuggestedJob
from skillmatch.matching import JobMatch, SavedAnalysis
from skillmatch.resume import ParsedResume, ResumeAnalysis

APP = typer.Typer(add_completion=False, help="SkillMatch CLI")
console = Console()

# Sub-apps
config_app = typer.Typer(help="Config management")
resume_app = typer.Typer(help="Resume operations")
match_app = typer.Typer(help="Job description matching")
jobs_app = typer.Typer(help="Suggested jobs")
auth_app = typer.Typer(help="Login / signup (demo mode when offline)")

APP.add_typer(config_app, name="config")
APP.add_typer(resume_app, name="resume")
APP.add_typer(match_app, name="match")
APP.add_typer(jobs_app, name="jobs")
APP.add_typer(auth_app, name="auth")


def print_config(conf: Dict[str, Any]):
    table = Table(title="Effective Configuration")
    table.add_column("Key")
    table.add_column("Value")
    def _walk(prefix: str, obj: Any):
        if isinstance(obj, dict):
            for k, v in obj.items():
                _walk(f"{prefix}.{k}" if prefix else k, v)
        else:
            table.add_row(prefix, json.dumps(obj) if isinstance(obj, (list, dict)) else str(obj))
    _walk('', conf)
    console.print(table)


def print_json(data: Any):
    print(json.dumps(data, indent=2, default=str))


# Global options context
class Context:
    def __init__(self):
        self.config: Dict[str, Any] = {}
        self.seed: Optional[int] = None
        self.offline: bool = False
        self._services: Optional[AppServices] = None

    def services(self) -> AppServices:
        """Validate the config and wire the services on first use"""
        if self._services is None:
            try:
                app_config: AppConfig = validate_config(self.config)
            except ConfigError as e:
                console.print(f"[red]Config invalid:[/red] {e}")
                raise typer.Exit(code=1)
            if self.offline:
                app_config.remote.enabled = False
            self._services = create_app_services(app_config, rng=random.Random(self.seed))
        return self._services


pass_context = contextvars.ContextVar("skm_ctx")


@APP.callback()
def main(
    ctx: typer.Context,
    config: Optional[Path] = typer.Option(None, '--config', help='Config file path'),
    seed: Optional[int] = typer.Option(None, '--seed', help='Seed for the random draws (confidence, job percentages, suggestion order)'),
    offline: bool = typer.Option(False, '--offline', help='Skip the remote backend and use local heuristics only'),
):
    c = Context()
    try:
        c.config = load_config(config)
    except ConfigError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(code=1)
    c.seed = seed
    c.offline = offline
    # logging setup
    level = getattr(logging, str(c.config.get('logging', {}).get('level', 'INFO')).upper(), logging.INFO)
    logging.basicConfig(level=level, format='%(asctime)s %(levelname)s %(name)s %(message)s')
    pass_context.set(c)


def _run(coro):
    """Run a service coroutine, turning domain errors into a red message and exit 1"""
    try:
        return asyncio.run(coro)
    except SkillMatchError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)


def _require_file(file: Path) -> None:
    if not file.exists():
        console.print(f"[red]Resume file not found: {file}[/red]")
        raise typer.Exit(1)


# --------------- Config Commands ---------------
@config_app.command('show')
def config_show():
    ctx = pass_context.get()
    print_config(ctx.config)


@config_app.command('validate')
def config_validate():
    ctx = pass_context.get()
    try:
        validate_config(ctx.config)
    except ConfigError as e:
        console.print(f"[red]Config invalid:[/red] {e}")
        raise typer.Exit(code=1)
    console.print("[green]Config OK[/green]")


# --------------- Resume Commands ---------------
def _show_parsed(parsed: ParsedResume):
    console.print(f"[cyan]Name:[/cyan] {parsed.contact.name or 'Not detected'}")
    console.print(f"[cyan]Email:[/cyan] {parsed.contact.email or 'Not detected'}")
    console.print(f"[cyan]Phone:[/cyan] {parsed.contact.phone or 'Not detected'}")
    console.print(f"[cyan]Skills found:[/cyan] {', '.join(parsed.skills) or 'None'}")
    console.print(f"[cyan]Experience entries:[/cyan] {len(parsed.experience)}"
                  + (" (placeholder)" if parsed.experience_fallback else ""))
    console.print(f"[cyan]Education entries:[/cyan] {len(parsed.education)}"
                  + (" (placeholder)" if parsed.education_fallback else ""))
    console.print(f"[cyan]Summary:[/cyan] {parsed.summary or 'Not detected'}")


def _show_analysis(analysis: ResumeAnalysis):
    ml = analysis.ml_analysis
    console.print(f"[cyan]Skills:[/cyan] {', '.join(analysis.skills) or 'None'}")
    if ml is None:
        console.print(analysis.summary)
        return
    console.print(f"[cyan]Experience level:[/cyan] {ml.experience_level.value}")
    console.print(f"[cyan]Confidence:[/cyan] {ml.confidence_score}%")
    console.print(f"[cyan]Industry fit:[/cyan] {', '.join(ml.industry_fit)}")

    table = Table(title="Resume Analysis")
    table.add_column("Key strengths", style="green")
    table.add_column("Suggested improvements", style="yellow")
    for i in range(max(len(ml.key_strengths), len(ml.suggested_improvements))):
        table.add_row(
            ml.key_strengths[i] if i < len(ml.key_strengths) else "",
            ml.suggested_improvements[i] if i < len(ml.suggested_improvements) else "",
        )
    console.print(table)
    console.print(ml.description)


@resume_app.command('parse')
def resume_parse(
    file: Path,
    as_json: bool = typer.Option(False, '--json', help='Output JSON'),
):
    """Parse a resume file (PDF, DOCX, TXT) and show what was extracted"""
    _require_file(file)
    services = pass_context.get().services()
    parsed = _run(services.resume.parse_resume(file.read_bytes(), file.name))

    if as_json:
        print_json(parsed.model_dump(mode="json", by_alias=True))
        return
    console.print(f"[green]Successfully parsed resume: {file}[/green]")
    _show_parsed(parsed)


@resume_app.command('analyze')
def resume_analyze(
    file: Path,
    as_json: bool = typer.Option(False, '--json', help='Output JSON'),
):
    """Parse and analyze a resume"""
    _require_file(file)
    services = pass_context.get().services()
    analysis = _run(services.resume.analyze_file(file))

    if as_json:
        print_json(analysis.model_dump(mode="json", by_alias=True))
        return
    _show_analysis(analysis)


# --------------- Match Commands ---------------
def _read_job_description(job_file: Optional[Path], description: Optional[str]) -> str:
    if description is not None:
        return description
    if job_file is None:
        console.print("[red]Provide --job FILE or --description TEXT[/red]")
        raise typer.Exit(1)
    if not job_file.exists():
        console.print(f"[red]Job description file not found: {job_file}[/red]")
        raise typer.Exit(1)
    return job_file.read_text(encoding='utf-8')


def _show_match(match: JobMatch):
    color = "green" if match.match_score >= 70 else "yellow" if match.match_score >= 40 else "red"
    console.print(f"[bold {color}]Match score: {match.match_score}%[/bold {color}]")

    table = Table(title="Skills Gap")
    table.add_column("Matching", style="green")
    table.add_column("Missing", style="red")
    table.add_column("Partial", style="yellow")
    columns: List[List[str]] = [match.matching_skills, match.missing_skills, match.partial_skills]
    for i in range(max(len(c) for c in columns)):
        table.add_row(*[c[i] if i < len(c) else "" for c in columns])
    console.print(table)

    for suggestion in match.suggestions:
        console.print(f"[bold]{suggestion.title}[/bold]: {suggestion.description}")
        if suggestion.example:
            console.print(f"  [dim]e.g. {suggestion.example}[/dim]")


@match_app.command('run')
def match_run(
    resume_file: Path,
    job_file: Optional[Path] = typer.Option(None, '--job', help='File holding the job description'),
    description: Optional[str] = typer.Option(None, '--description', help='Job description text'),
    save: bool = typer.Option(True, '--save/--no-save', help='Record the result in the local history'),
    as_json: bool = typer.Option(False, '--json', help='Output JSON'),
):
    """Score a resume against a job description"""
    _require_file(resume_file)
    job_description = _read_job_description(job_file, description)
    services = pass_context.get().services()

    async def run_match() -> JobMatch:
        resume = await services.resume.analyze_file(resume_file)
        if save:
            return await services.matching.match_and_save(resume, job_description)
        return await services.matching.analyze_job_match(resume, job_description)

    match = _run(run_match())
    if as_json:
        print_json(match.model_dump(mode="json", by_alias=True))
        return
    _show_match(match)


@match_app.command('history')
def match_history(
    as_json: bool = typer.Option(False, '--json', help='Output JSON'),
):
    """List saved match results"""
    services = pass_context.get().services()
    saved: List[SavedAnalysis] = _run(services.matching.saved_analyses())

    if as_json:
        print_json([s.model_dump(mode="json", by_alias=True) for s in saved])
        return
    if not saved:
        console.print("[yellow]No saved analyses[/yellow]")
        return
    table = Table(title="Saved Analyses")
    table.add_column("Timestamp")
    table.add_column("Score", justify="right")
    table.add_column("Matching")
    table.add_column("Missing")
    for s in saved:
        table.add_row(s.timestamp, f"{s.match_score}%", ", ".join(s.matching_skills),
                      ", ".join(s.missing_skills))
    console.print(table)


# --------------- Jobs Commands ---------------
@jobs_app.command('suggest')
def jobs_suggest(
    resume_file: Path,
    as_json: bool = typer.Option(False, '--json', help='Output JSON'),
):
    """Rank catalog jobs against a resume"""
    _require_file(resume_file)
    services = pass_context.get().services()

    async def run_suggest() -> List[SuggestedJob]:
        resume = await services.resume.analyze_file(resume_file)
        return await services.matching.suggested_jobs(resume)

    jobs = _run(run_suggest())
    if as_json:
        print_json([j.model_dump(mode="json", by_alias=True) for j in jobs])
        return
    table = Table(title="Suggested Jobs")
    table.add_column("Match", justify="right")
    table.add_column("Title")
    table.add_column("Company")
    table.add_column("Location")
    table.add_column("Salary")
    for job in jobs:
        table.add_row(f"{job.match_percentage}%", job.title, job.company, job.location, job.salary)
    console.print(table)


# --------------- Auth Commands ---------------
@auth_app.command('login')
def auth_login(
    email: str = typer.Option(..., '--email', prompt=True),
    password: str = typer.Option(..., '--password', prompt=True, hide_input=True),
):
    """Log in (falls back to the demo account when the backend is unavailable)"""
    services = pass_context.get().services()
    user = _run(services.auth.login(email, password))
    console.print(f"[green]Logged in as {user.name} <{user.email}>[/green]")


@auth_app.command('signup')
def auth_signup(
    name: str = typer.Option(..., '--name', prompt=True),
    email: str = typer.Option(..., '--email', prompt=True),
    password: str = typer.Option(..., '--password', prompt=True, hide_input=True),
    confirm_password: str = typer.Option(..., '--confirm-password', prompt=True, hide_input=True),
):
    """Create an account"""
    services = pass_context.get().services()
    user = _run(services.auth.signup(name, email, password, confirm_password))
    console.print(f"[green]Account created for {user.name} <{user.email}>[/green]")


@auth_app.command('logout')
def auth_logout():
    services = pass_context.get().services()
    _run(services.auth.logout())
    console.print("[green]Logged out[/green]")


@auth_app.command('whoami')
def auth_whoami():
    """Show the logged-in user"""
    services = pass_context.get().services()
    user = _run(services.auth.restore_session())
    if user is None:
        console.print("[yellow]Not logged in[/yellow]")
        raise typer.Exit(1)
    console.print(f"{user.name} <{user.email}> (id {user.id})")


if __name__ == "__main__":
    APP()
