"""CLI entry point for restclient."""

import json
import logging
from pathlib import Path

import click
import yaml

from restclient.errors import RestClientError
from restclient.marshalling import to_formatted_json
from restclient.request import Request
from restclient.template import UriTemplate, to_param_string


def _load_request(file_path: Path) -> Request:
    """Build a Request from a YAML request description."""
    try:
        doc = yaml.safe_load(file_path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise click.ClickException(f"Invalid YAML in {file_path}: {e}")

    if not isinstance(doc, dict) or "path" not in doc:
        raise click.ClickException(f"{file_path} must be a mapping with a 'path' key.")

    path_params = doc.get("path_params") or []
    if isinstance(path_params, dict):
        request = Request.target(doc["path"])
        for name, value in path_params.items():
            request = request.with_path(name, value)
    else:
        request = Request.target(doc["path"], *path_params)

    for name, value in (doc.get("query") or {}).items():
        request = request.with_query(name, value)
    for name, value in (doc.get("headers") or {}).items():
        request = request.with_header(name, value)
    if "body" in doc:
        request = request.with_body(doc["body"])
    if doc.get("method"):
        request = request.with_method(str(doc["method"]).upper())

    return request


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def main(verbose: bool):
    """Build HTTP request descriptors from tagged objects."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)


@main.command("vars")
@click.argument("template")
def list_vars(template: str):
    """List the variables of a URI template, in order."""
    for name in UriTemplate(template).variables:
        click.echo(name)


@main.command()
@click.argument("request_path", type=click.Path(exists=True, path_type=Path))
@click.option("--pretty/--compact", default=True, help="Indent the JSON output.")
def render(request_path: Path, pretty: bool):
    """Render a YAML request description as a resolved request descriptor."""
    try:
        request = _load_request(request_path)
        rendered = {
            "method": request.method.value if request.method else None,
            "uri": request.get_uri(),
            "headers": {k: to_param_string(v) for k, v in request.header_params.items()},
            "body": request.body,
        }
    except (RestClientError, ValueError) as e:
        raise click.ClickException(str(e))

    click.echo(to_formatted_json(rendered) if pretty else json.dumps(rendered))
