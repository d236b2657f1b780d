"""Command line interface for fetching historical price updates."""

from __future__ import annotations

import asyncio
import json

import typer

from pyth_benchmarks.core.client import BenchmarksClient
from pyth_benchmarks.core.config import ConfigManager
from pyth_benchmarks.core.exceptions import BenchmarksError, ConfigurationError
from pyth_benchmarks.core.logging import configure_logging
from pyth_benchmarks.core.models import PriceIdentifier

from .utils import CONFIG_EXIT_CODE, PROVIDER_EXIT_CODE, emit_error


def get_client(endpoint: str | None) -> BenchmarksClient:
    """Factory hook for obtaining a :class:`BenchmarksClient`."""

    return BenchmarksClient.from_config_manager(endpoint=endpoint)


def _parse_ids(values: list[str]) -> list[PriceIdentifier]:
    try:
        return [PriceIdentifier.from_hex(value.strip()) for value in values]
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--id") from exc


def create_app() -> typer.Typer:
    """Create the Typer application."""

    app = typer.Typer(add_completion=False, help="Pyth Benchmarks command line interface")

    @app.callback()
    def main(
        log_level: str | None = typer.Option(
            None,
            "--log-level",
            help="Logging level for JSON logs written to stderr. Defaults to the configured level.",
        ),
    ) -> None:
        logging_config = ConfigManager().get_config().logging
        level = log_level or logging_config.level
        try:
            configure_logging(
                level.upper(),
                file_output=bool(logging_config.file),
                file_path=logging_config.file,
            )
        except ValueError as exc:
            raise typer.BadParameter(str(exc), param_hint="--log-level") from exc

    @app.command("fetch")
    def fetch_command(
        publish_time: int = typer.Argument(..., help="Unix timestamp of the updates to fetch."),
        ids: list[str] = typer.Option(
            [],
            "--id",
            help="Price feed identifier as hex; repeat for several feeds.",
        ),
        endpoint: str | None = typer.Option(
            None,
            "--endpoint",
            help="Benchmarks base URL, overriding configuration.",
        ),
    ) -> None:
        """Fetch price feeds and update data published at PUBLISH_TIME and print them as JSON."""

        price_ids = _parse_ids(ids)
        client = get_client(endpoint)
        try:
            result = asyncio.run(client.get_verified_price_feeds(price_ids, publish_time))
        except ConfigurationError as error:
            emit_error(**error.to_payload())
            raise typer.Exit(code=CONFIG_EXIT_CODE) from error
        except BenchmarksError as error:
            emit_error(**error.to_payload())
            raise typer.Exit(code=PROVIDER_EXIT_CODE) from error

        typer.echo(json.dumps(result.model_dump(mode="json"), indent=2))

    return app


app = create_app()


def run() -> None:
    """Console script entry point."""

    app()


if __name__ == "__main__":  # pragma: no cover
    run()
