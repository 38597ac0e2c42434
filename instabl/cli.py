"""
Command-line interface for instabl.

Analyzes a Go repository and prints one ``instability<TAB>package`` line
per local package.
"""
import logging
from pathlib import Path

import click

from instabl import __version__
from instabl.analyzer import InstabilityAnalyzer
from instabl.report import export_to_csv, export_to_json, format_report, to_dataframe
from instabl.resolver import NamespaceRootError, PackageResolver

logger = logging.getLogger(__name__)

EXIT_USAGE = 1
EXIT_NO_GOPATH = 1
EXIT_INVALID_REPO = 2


class InstablCommand(click.Command):
    """Command whose usage errors exit with EXIT_USAGE instead of click's 2."""

    def parse_args(self, ctx, args):
        try:
            return super().parse_args(ctx, args)
        except click.UsageError as e:
            e.exit_code = EXIT_USAGE
            raise


@click.command(cls=InstablCommand, context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("repository", nargs=-1, type=click.Path(path_type=Path))
@click.option("--gopath", envvar="GOPATH", help="Go workspace root (default: $GOPATH)")
@click.option("--export-csv", type=click.Path(dir_okay=False, path_type=Path),
              help="Also export per-package fan-in/fan-out to a CSV file")
@click.option("--export-json", type=click.Path(dir_okay=False, path_type=Path),
              help="Also export per-package fan-in/fan-out to a JSON file")
@click.option("-v", "--verbose", is_flag=True, help="Log analysis progress to stderr")
@click.version_option(version=__version__)
@click.pass_context
def main(ctx, repository, gopath, export_csv, export_json, verbose):
    """
    Report package instability for a Go repository.

    REPOSITORY is the repository root folder (or a single .go file) inside
    the GOPATH workspace. Each output line is the instability
    fan_out / (fan_in + fan_out) followed by a tab and the package path.
    """
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )

    if len(repository) != 1:
        click.echo(f"Error: expected exactly one repository, got {len(repository)}", err=True)
        click.echo(ctx.get_usage(), err=True)
        ctx.exit(EXIT_USAGE)
    repo_path = repository[0]

    if not (repo_path.is_dir() or repo_path.is_file()):
        click.echo(f"analyze failed: provided repo '{repo_path}' is not a folder or file", err=True)
        ctx.exit(EXIT_INVALID_REPO)

    try:
        resolver = PackageResolver(gopath)
    except NamespaceRootError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(EXIT_NO_GOPATH)

    analyzer = InstabilityAnalyzer(repo_path, resolver)
    stats = analyzer.analyze()

    report = format_report(stats)
    if report:
        click.echo(report)

    if export_csv or export_json:
        df = to_dataframe(stats)
        if export_csv:
            export_to_csv(df, export_csv)
            logger.info("Exported to %s", export_csv)
        if export_json:
            export_to_json(df, export_json)
            logger.info("Exported to %s", export_json)


if __name__ == "__main__":
    main()
