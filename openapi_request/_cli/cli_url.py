import json
import logging
from typing import Any, Optional

import click
from pydantic import ValidationError

from .._config import load_options
from .._utils import create_final_url, create_query_serializer, setup_logging
from ..models import QuerySerializerOptions, UnsupportedStyleError, UnsupportedValueError
from ._utils._console import ConsoleLogger

logger = logging.getLogger(__name__)
console = ConsoleLogger()


def _parse_pairs(
    ctx: click.Context, param: click.Parameter, pairs: tuple[str, ...]
) -> dict[str, Any]:
    """Parse repeated ``KEY=VALUE`` options. A repeated key collects its values into a list."""
    values: dict[str, Any] = {}
    for pair in pairs:
        key, separator, value = pair.partition("=")
        if not separator or not key:
            raise click.BadParameter(f"expected KEY=VALUE, got `{pair}`.")

        if key not in values:
            values[key] = value
        elif isinstance(values[key], list):
            values[key].append(value)
        else:
            values[key] = [values[key], value]

    return values


def _parse_params_json(raw: Optional[str]) -> dict[str, Any]:
    if raw is None:
        return {}

    try:
        params = json.loads(raw)
    except json.JSONDecodeError as e:
        console.error(f"--params is not valid JSON: {e.msg}")
    if not isinstance(params, dict):
        console.error("--params must be a JSON object.")

    return params


def _merge(location: str, pairs: dict[str, Any], params: dict[str, Any]) -> dict[str, Any]:
    from_json = params.get(location) or {}
    if not isinstance(from_json, dict):
        console.error(f'--params "{location}" must be a JSON object.')

    for key in pairs.keys() & from_json.keys():
        console.warning(f"--params overrides the {location} parameter `{key}`.")

    return {**pairs, **from_json}


@click.command()
@click.argument("path")
@click.option(
    "--base-url",
    default=None,
    help="Base URL prepended to PATH. Defaults to OPENAPI_BASE_URL.",
)
@click.option(
    "-p",
    "--path-param",
    "path_params",
    multiple=True,
    metavar="KEY=VALUE",
    callback=_parse_pairs,
    help="Path parameter. Repeat the key to pass an array.",
)
@click.option(
    "-q",
    "--query",
    "query_params",
    multiple=True,
    metavar="KEY=VALUE",
    callback=_parse_pairs,
    help="Query parameter. Repeat the key to pass an array.",
)
@click.option(
    "--params",
    "params_json",
    default=None,
    help='JSON object with "path" and "query" parameters, e.g. \'{"query": {"color": {"r": 1}}}\'.',
)
@click.option(
    "--array-style",
    type=click.Choice(["form", "spaceDelimited", "pipeDelimited"]),
    default="form",
    show_default=True,
    help="Serialization style of array query parameters.",
)
@click.option("--array-explode/--no-array-explode", default=True, show_default=True)
@click.option(
    "--object-style",
    type=click.Choice(["form", "deepObject"]),
    default="deepObject",
    show_default=True,
    help="Serialization style of object query parameters.",
)
@click.option("--object-explode/--no-object-explode", default=True, show_default=True)
@click.option(
    "--allow-reserved",
    is_flag=True,
    help="Send reserved characters in query values without percent-encoding them.",
)
@click.option("--debug", is_flag=True, help="Enable debug logging.")
def url(
    path: str,
    base_url: Optional[str],
    path_params: dict[str, Any],
    query_params: dict[str, Any],
    params_json: Optional[str],
    array_style: str,
    array_explode: bool,
    object_style: str,
    object_explode: bool,
    allow_reserved: bool,
    debug: bool,
) -> None:
    """Print the final URL of PATH, e.g. `openapi-request url "/pets/{id}" -p id=42 -q tags=a -q tags=b`."""
    setup_logging(debug)

    params = _parse_params_json(params_json)
    options = load_options(base_url=base_url)
    logger.debug(f"Base URL: {options.base_url!r}")

    try:
        query_serializer = create_query_serializer(
            QuerySerializerOptions(
                array={"style": array_style, "explode": array_explode},
                object={"style": object_style, "explode": object_explode},
                allow_reserved=allow_reserved,
            )
        )
        final_url = create_final_url(
            path,
            base_url=options.base_url,
            params={
                "path": _merge("path", path_params, params),
                "query": _merge("query", query_params, params),
            },
            query_serializer=query_serializer,
        )
    except UnsupportedValueError as e:
        console.hint("Only flat arrays and objects can be serialized.")
        console.error(e.message)
    except (UnsupportedStyleError, ValidationError) as e:
        console.error(str(e))

    click.echo(final_url)


if __name__ == "__main__":
    url()
