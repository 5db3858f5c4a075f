"""
CLI Package for the Fizop validator

This package provides the command line interface using Click groups and
subcommands. The main() group registers all subcommands; cli() is the
console script entry point declared in setup.py.
"""

import os
import click
from dotenv import load_dotenv

# Priority: .env.dev (if exists) overrides .env
if os.path.exists('.env.dev'):
    load_dotenv('.env.dev')
elif os.path.exists('.env'):
    load_dotenv('.env')

from fizop import __version__
from .validate import validate


@click.group()
@click.version_option(version=__version__, prog_name='fizop')
def main():
    """Fizop CLI - Validate Fizop operator catalogs.

    Checks documents structurally (operator, label and image shape) and
    semantically (locale coverage, locale tags, image data) from local
    files, URLs or npm packages.
    """
    pass


main.add_command(validate)


def cli():
    """Console script entry point."""
    main()
