"""Command-line interface for research-intel."""

import asyncio
import json
import logging
from pathlib import Path

import click

from research_intel.billing import LoggingBilling
from research_intel.config import get_settings
from research_intel.data_sources.base_client import DataSourceError
from research_intel.data_sources.semantic_scholar import SemanticScholarClient
from research_intel.handlers import build_registry
from research_intel.registry import EntrypointValidationError, UnknownEntrypointError


async def _dispatch(key: str, raw_input: dict) -> dict:
    settings = get_settings()
    async with SemanticScholarClient.from_settings(settings) as client:
        registry = build_registry(client, LoggingBilling(settings))
        result = await registry.dispatch(key, raw_input)
    return result.output


@click.group()
@click.version_option(package_name="research-intel")
def main():
    """research-intel: priced paper, author and citation lookups."""
    logging.basicConfig(level=get_settings().log_level.upper())


@main.command()
@click.option("--host", default=None, help="Bind address (default from HOST)")
@click.option("--port", type=int, default=None, help="Listen port (default from PORT)")
def serve(host: str | None, port: int | None):
    """Run the HTTP server."""
    import uvicorn

    settings = get_settings()
    port = port or settings.port
    click.echo(f"Research Intel Agent running on port {port}")
    uvicorn.run(
        "research_intel.api.main:app",
        host=host or settings.host,
        port=port,
        log_level=settings.log_level.lower(),
    )


@main.command()
def entrypoints():
    """List entrypoints with their prices."""
    registry = build_registry(SemanticScholarClient.from_settings(get_settings()))
    for definition in registry.entrypoints():
        click.echo(f"  {definition.key:<14} {definition.price:>5}  {definition.description}")


@main.command()
@click.argument("key")
@click.option(
    "-i", "--input", "raw_input", default="{}", show_default=True, help="Input as JSON"
)
@click.option("-o", "--output", type=click.Path(), help="Output file path (JSON)")
def invoke(key: str, raw_input: str, output: str | None):
    """Invoke entrypoint KEY locally and print its output."""
    try:
        payload = json.loads(raw_input)
    except json.JSONDecodeError as e:
        raise click.BadParameter(f"not valid JSON: {e}", param_hint="--input")

    try:
        result = asyncio.run(_dispatch(key, payload))
    except (EntrypointValidationError, UnknownEntrypointError, DataSourceError) as e:
        raise click.ClickException(str(e))
    text = json.dumps(result, indent=2)

    if output:
        Path(output).write_text(text)
        click.echo(f"Results saved to: {output}")
    else:
        click.echo(text)


if __name__ == "__main__":
    main()
