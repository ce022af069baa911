"""Main CLI entry point for mergelog."""

import logging
import sys

import click

from .. import __version__
from ..changelog import generate
from ..config import STRATEGIES, get_config
from ..exceptions import MergelogError


@click.command(context_settings={'help_option_names': ['-h', '--help']})
@click.option('--github-token', help='OAuth2 token for GitHub API (or MERGELOG_GITHUB_TOKEN)')
@click.option('--main-branch', help='Name of the main branch (main, master, ...)  [default: main]')
@click.option('--strategy', type=click.Choice(STRATEGIES),
              help='How to find merged pull requests  [default: closed-pulls]')
@click.option('--tag', help='Tag name for the section header  [default: NEW_TAG_HERE]')
@click.option('--repo', 'repo_path', type=click.Path(exists=True, file_okay=False),
              help='Path to the git repository (default: current directory)')
@click.option('--config-file', '-c', help='Path to JSON configuration file')
@click.option('--debug', is_flag=True, help='Enable debug logging')
@click.version_option(version=__version__, prog_name="mergelog")
def cli(github_token, main_branch, strategy, tag, repo_path, config_file, debug):
    """Print a changelog section built from merged GitHub pull requests."""

    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    try:
        config = get_config(
            config_file,
            github_token=github_token,
            main_branch=main_branch,
            strategy=strategy,
            tag=tag,
            repo_path=repo_path,
        )
        changelog = generate(config)
    except MergelogError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    click.echo(changelog)


def main():
    """Main entry point for console script."""
    cli()


if __name__ == '__main__':
    main()
