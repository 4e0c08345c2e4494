"""Command-line interface for GitHub team management."""

import json
import logging
from typing import Any, Callable, Optional

import httpx
import typer
from pydantic import ValidationError
from rich.console import Console
from rich.json import JSON
from rich.markup import escape

from . import __version__
from .api.teams import Teams
from .config import GitHubConfig, load_config
from .diagnostics import CollectingDiagnostics, DeprecationNotice
from .exceptions import MissingRequiredField
from .transport import GitHubTransport

app = typer.Typer(
    name="gh-teams",
    help="GitHub Teams - manage organization teams, members and repositories",
    add_completion=False,
)
console = Console()
err_console = Console(stderr=True)

ORG_OPTION = typer.Option(None, "--org", "-o", help="Organization login")
CONFIG_OPTION = typer.Option(
    None, "--config", "-c", help="Path to YAML config (default: environment)"
)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log HTTP requests"),
):
    """Manage GitHub organization teams."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )


def _print_notice(notice: DeprecationNotice) -> None:
    err_console.print(f"[yellow]⚠ {escape(notice.message)}[/yellow]")


def _load_config(config_path: Optional[str]) -> GitHubConfig:
    """Load configuration from a YAML file or the environment."""
    return load_config(config_path) if config_path else GitHubConfig.from_env()


def _run(config_path: Optional[str], call: Callable[[Teams], Any]) -> None:
    """Execute one builder call and print its result as JSON."""
    try:
        config = _load_config(config_path)
        with GitHubTransport(config) as transport:
            teams = Teams(
                transport,
                diagnostics=CollectingDiagnostics(callback=_print_notice),
            )
            result = call(teams)
    except MissingRequiredField as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)
    except (FileNotFoundError, ValidationError) as e:
        err_console.print(f"[red]Configuration error: {escape(str(e))}[/red]")
        raise typer.Exit(1)
    except httpx.HTTPStatusError as e:
        err_console.print(
            f"[red]GitHub API error: {e.response.status_code} "
            f"{e.request.method} {escape(str(e.request.url))}[/red]"
        )
        raise typer.Exit(1)
    except httpx.HTTPError as e:
        err_console.print(f"[red]Request failed: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    if result is None:
        console.print("[green]✓ Done[/green]")
    else:
        console.print(JSON(json.dumps(result)))


def _team_params(
    name: Optional[str],
    description: Optional[str],
    privacy: Optional[str],
    permission: Optional[str],
) -> dict[str, Any]:
    """Collect the body fields that were given on the command line."""
    params = {
        "name": name,
        "description": description,
        "privacy": privacy,
        "permission": permission,
    }
    return {k: v for k, v in params.items() if v is not None}


# =============================================================================
# TEAMS
# =============================================================================


@app.command("list")
def list_teams(
    org: str = typer.Argument(..., help="Organization login"),
    config: Optional[str] = CONFIG_OPTION,
):
    """List the teams of an organization."""
    _run(config, lambda teams: teams.all(org))


@app.command()
def create(
    org: str = typer.Argument(..., help="Organization login"),
    name: Optional[str] = typer.Option(None, "--name", "-n", help="Team name"),
    description: Optional[str] = typer.Option(None, "--description", help="Team description"),
    privacy: Optional[str] = typer.Option(None, "--privacy", help="secret or closed"),
    permission: Optional[str] = typer.Option(None, "--permission", help="pull, push or admin"),
    repo: Optional[list[str]] = typer.Option(None, "--repo", "-r", help="Repository (org/name), repeatable"),
    config: Optional[str] = CONFIG_OPTION,
):
    """Create a team."""
    params = _team_params(name, description, privacy, permission)
    if repo:
        params["repo_names"] = repo
    _run(config, lambda teams: teams.create(org, params))


@app.command()
def show(
    team: str = typer.Argument(..., help="Team slug or id"),
    org: Optional[str] = ORG_OPTION,
    config: Optional[str] = CONFIG_OPTION,
):
    """Show a team."""
    _run(config, lambda teams: teams.show(team, organization=org))


@app.command()
def update(
    team: str = typer.Argument(..., help="Team slug or id"),
    name: Optional[str] = typer.Option(None, "--name", "-n", help="Team name"),
    description: Optional[str] = typer.Option(None, "--description", help="Team description"),
    privacy: Optional[str] = typer.Option(None, "--privacy", help="secret or closed"),
    permission: Optional[str] = typer.Option(None, "--permission", help="pull, push or admin"),
    org: Optional[str] = ORG_OPTION,
    config: Optional[str] = CONFIG_OPTION,
):
    """Edit a team."""
    params = _team_params(name, description, privacy, permission)
    _run(config, lambda teams: teams.update(team, params, organization=org))


@app.command()
def remove(
    team: str = typer.Argument(..., help="Team slug or id"),
    org: Optional[str] = ORG_OPTION,
    config: Optional[str] = CONFIG_OPTION,
):
    """Delete a team."""
    _run(config, lambda teams: teams.remove(team, organization=org))


# =============================================================================
# MEMBERS
# =============================================================================


@app.command()
def members(
    team: str = typer.Argument(..., help="Team slug or id"),
    org: Optional[str] = ORG_OPTION,
    config: Optional[str] = CONFIG_OPTION,
):
    """List team members."""
    _run(config, lambda teams: teams.members(team, organization=org))


@app.command()
def check(
    team: str = typer.Argument(..., help="Team slug or id"),
    username: str = typer.Argument(..., help="GitHub username"),
    org: Optional[str] = ORG_OPTION,
    config: Optional[str] = CONFIG_OPTION,
):
    """Show a user's team membership."""
    _run(config, lambda teams: teams.check(team, username, organization=org))


@app.command("add-member")
def add_member(
    team: str = typer.Argument(..., help="Team slug or id"),
    username: str = typer.Argument(..., help="GitHub username"),
    org: Optional[str] = ORG_OPTION,
    config: Optional[str] = CONFIG_OPTION,
):
    """Add a user to a team."""
    _run(config, lambda teams: teams.add_member(team, username, organization=org))


@app.command("remove-member")
def remove_member(
    team: str = typer.Argument(..., help="Team slug or id"),
    username: str = typer.Argument(..., help="GitHub username"),
    org: Optional[str] = ORG_OPTION,
    config: Optional[str] = CONFIG_OPTION,
):
    """Remove a user from a team."""
    _run(config, lambda teams: teams.remove_member(team, username, organization=org))


# =============================================================================
# REPOSITORIES
# =============================================================================


@app.command()
def repos(
    team: str = typer.Argument(..., help="Team id"),
    config: Optional[str] = CONFIG_OPTION,
):
    """List a team's repositories."""
    _run(config, lambda teams: teams.repositories(team))


@app.command()
def repo(
    team: str = typer.Argument(..., help="Team id"),
    owner: str = typer.Argument(..., help="Repository owner"),
    repository: str = typer.Argument(..., help="Repository name"),
    config: Optional[str] = CONFIG_OPTION,
):
    """Check a team's access to a repository."""
    _run(config, lambda teams: teams.repository(team, owner, repository))


@app.command("add-repo")
def add_repo(
    team: str = typer.Argument(..., help="Team id"),
    owner: str = typer.Argument(..., help="Repository owner"),
    repository: str = typer.Argument(..., help="Repository name"),
    permission: Optional[str] = typer.Option(None, "--permission", help="pull, push or admin"),
    config: Optional[str] = CONFIG_OPTION,
):
    """Grant a team access to a repository."""
    params = {"permission": permission} if permission else {}
    _run(config, lambda teams: teams.add_repository(team, owner, repository, params))


@app.command("remove-repo")
def remove_repo(
    team: str = typer.Argument(..., help="Team id"),
    owner: str = typer.Argument(..., help="Repository owner"),
    repository: str = typer.Argument(..., help="Repository name"),
    config: Optional[str] = CONFIG_OPTION,
):
    """Revoke a team's access to a repository."""
    _run(config, lambda teams: teams.remove_repository(team, owner, repository))


@app.command()
def version():
    """Show version information."""
    console.print(f"[bold]gh-teams[/bold] version [cyan]{__version__}[/cyan]")


if __name__ == "__main__":
    app()
