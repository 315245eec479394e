import importlib.metadata

import click

from .cli_url import url as url  # type: ignore


def _get_safe_version() -> str:
    """Get the version of the openapi-request package."""
    try:
        version = importlib.metadata.version("openapi-request")
        return version
    except importlib.metadata.PackageNotFoundError:
        return "unknown"


@click.group()
@click.version_option(
    _get_safe_version(),
    prog_name="openapi-request",
    message="%(prog)s version %(version)s",
)
def cli() -> None:
    """Build request URLs from OpenAPI path templates and parameters."""


cli.add_command(url)
