"""Command-line interface for kattis_py."""

import functools
import zipfile
from pathlib import Path
from typing import Optional

import click
import requests
from rich.markup import escape

from . import __version__
from .client import (
    KattisSession,
    Language,
    Submission,
    assert_problem_exists,
    download_samples,
    track_submission,
)
from .config import Credentials, GlobalConfig, SolutionConfig, Template, TemplateConfig
from .errors import (
    DownloadSampleFailed,
    KattisError,
    SampleDirectoryNotFound,
    SolutionDirectoryExists,
    TemplateNotSpecified,
)
from .utils.terminal import (
    console,
    print_error,
    print_named_paths,
    print_warning,
    setup_logging,
)
from .verify import name_predicate, verify_solution, watch_solution


def report_errors(command):
    """Print errors raised by a command and exit with status 1."""

    @functools.wraps(command)
    def wrapper(*args, **kwargs):
        try:
            return command(*args, **kwargs)
        except (
            KattisError,
            OSError,
            requests.RequestException,
            zipfile.BadZipFile,
        ) as e:
            print_error(e)
            raise SystemExit(1)

    return wrapper


def _language(ctx, param, value: Optional[str]) -> Optional[Language]:
    if value is None:
        return None
    try:
        return Language.parse(value)
    except KattisError as e:
        raise click.BadParameter(str(e))


@click.group()
@click.version_option(version=__version__)
@click.option("--debug", is_flag=True, default=False, help="Enable debug output")
def cli(debug: bool):
    """kattis_py - test solutions locally and submit them to Kattis."""
    setup_logging(debug)


@cli.command()
@click.option("-p", "--problem", required=True, help="The id of the problem")
@click.option(
    "-d",
    "--dir",
    "directory",
    type=click.Path(path_type=Path),
    default=Path("./samples"),
    show_default=True,
    help="The directory to store the samples within",
)
@click.option("--hostname", help="The hostname to download from")
@report_errors
def samples(problem: str, directory: Path, hostname: Optional[str]):
    """Download the samples of a problem."""
    config = GlobalConfig.load()
    hostname = hostname or config.default_hostname

    assert_problem_exists(hostname, problem)

    for sample in download_samples(hostname, problem):
        path = sample.save_in(directory)
        console.print(f"[cyan]Saved {escape(str(path))}[/cyan]")


@cli.command()
@click.option("-p", "--problem", required=True, help="The id of the problem")
@click.option("-t", "--template", help="The template to use")
@click.option(
    "-d",
    "--dir",
    "directory",
    type=click.Path(path_type=Path),
    help="The name of the new directory (default: the problem id)",
)
@click.option("--hostname", help="The hostname to download from")
@report_errors
def new(problem: str, template: Optional[str], directory: Optional[Path], hostname: Optional[str]):
    """Create a new solution directory from a template."""
    config = GlobalConfig.load()
    hostname = hostname or config.default_hostname

    template_name = template or config.default_template
    if not template_name:
        raise TemplateNotSpecified()
    found = Template.find(template_name)

    directory = directory or Path(problem)
    if directory.is_dir():
        raise SolutionDirectoryExists(directory)

    # Check the problem and the template before touching the file system.
    assert_problem_exists(hostname, problem)
    template_config = TemplateConfig.load_or_default(found.path, warn=print_warning)

    directory.mkdir(parents=True)
    found.init_dir(directory)

    solution_config = SolutionConfig.from_template(template_config, problem, hostname)
    solution_config.save_in(directory)

    try:
        downloaded = download_samples(hostname, problem)
    except DownloadSampleFailed as e:
        if e.code == 404:
            print_warning("No samples found for problem.")
        else:
            print_warning(e)
        downloaded = []

    if downloaded:
        sample_dir = solution_config.sample_dir(directory)
        sample_dir.mkdir(parents=True, exist_ok=True)
        for sample in downloaded:
            sample.save_in(sample_dir)

    console.print(f"[green]Created {escape(str(directory))}[/green]")


@cli.command()
@click.option(
    "-d",
    "--dir",
    "directory",
    type=click.Path(path_type=Path),
    default=Path("./"),
    help="The directory containing the solution",
)
@click.option("-w", "--watch", is_flag=True, help="Rerun the tests when the submission files or samples change")
@click.option("-c", "--clear", is_flag=True, help="Clear the screen before building and before printing results")
@click.option("-i", "--ignore", help="Ignore samples matching a regex pattern")
@click.option("-f", "--filter", "filter_", help="Only test samples matching a regex pattern")
@report_errors
def test(directory: Path, watch: bool, clear: bool, ignore: Optional[str], filter_: Optional[str]):
    """Build the solution and check it against the samples."""
    config = SolutionConfig.load(directory)

    sample_dir = config.sample_dir(directory)
    if not sample_dir.is_dir():
        raise SampleDirectoryNotFound(sample_dir)

    predicate = name_predicate(filter_, ignore)

    if watch:
        watch_solution(directory, config, predicate, clear)
    else:
        verify_solution(directory, config, predicate, clear)


def print_submission(submission: Submission):
    console.print(f"[bold]Language:[/bold] {submission.language}")
    console.print("[bold]Files:[/bold]")
    for path in submission.files:
        console.print(f"  - {escape(str(path))}")
    console.print(f"[bold]Main Class:[/bold] {escape(submission.mainclass or '')}")


@cli.command()
@click.option(
    "-d",
    "--dir",
    "directory",
    type=click.Path(path_type=Path),
    default=Path("./"),
    help="The directory containing the solution",
)
@click.option("--lang", "language", callback=_language, help="Override the language")
@click.option("--main", "mainclass", help="Override the main class")
@click.option("-f", "--force", is_flag=True, help="Don't ask for confirmation before submitting")
@click.option("--hostname", help="The hostname to submit to")
@report_errors
def submit(
    directory: Path,
    language: Optional[Language],
    mainclass: Optional[str],
    force: bool,
    hostname: Optional[str],
):
    """Submit a solution and follow the judging."""
    config = SolutionConfig.load(directory)

    submission = Submission(
        files=[directory / path for path in config.files],
        language=language or config.language,
        mainclass=mainclass or config.mainclass,
    )

    print_submission(submission)

    if not force and not click.confirm("Proceed with the submission?", default=False):
        console.print("Cancelled submission.")
        return

    credentials = Credentials.find(hostname or config.hostname)
    session = KattisSession(credentials)

    submission_id = session.submit(config.problem, submission)
    console.print(f"Submission ID: {submission_id}")

    track_submission(session, submission_id)


@cli.group()
def template():
    """View and create solution templates."""
    pass


@template.command(name="new")
@click.argument("name")
@report_errors
def template_new(name: str):
    """Create a new template and print its path."""
    GlobalConfig.load()
    created = Template.create(name)
    click.echo("Created template: ", nl=False, err=True)
    click.echo(str(created.path))


@template.command(name="show")
@report_errors
def template_show():
    """Print the names and paths of all templates."""
    GlobalConfig.load()
    print_named_paths((t.name, t.path) for t in Template.list())


template.add_command(template_show, name="list")


@cli.group()
def config():
    """View configuration."""
    pass


@config.command(name="show")
@report_errors
def config_show():
    """Show the path to the global configuration file."""
    GlobalConfig.load()
    click.echo(str(GlobalConfig.file_path()))


@config.group()
def credentials():
    """
    Manage credentials. Credentials files can be downloaded from
    https://<kattis>/download/kattisrc.
    """
    pass


@credentials.command(name="show")
@report_errors
def credentials_show():
    """Print the names and paths of all credentials."""
    GlobalConfig.load()
    directory = Credentials.directory()
    print_named_paths(
        (path.name, path) for path in sorted(directory.iterdir()) if path.is_file()
    )


credentials.add_command(credentials_show, name="list")


@cli.command()
def version():
    """Show version information."""
    console.print(f"[bold cyan]kattis_py[/bold cyan] version [green]{__version__}[/green]")
    console.print("Test solutions locally and submit them to Kattis")


def main():
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
