import click
import msgspec

from idworker.env import Env, load_env
from idworker.logging import LoggingConfig
from idworker.snowflake import (
    ClockRegressionError,
    ConfigurationError,
    SnowflakeGenerator,
)


@click.command(help="Generate one or more identifiers.")
@click.option("--count", "-n", default=1, type=click.IntRange(min=1), show_default=True)
@click.option("--worker-id", default=None, type=int, help="Worker id (0-31). Overrides IDWORKER_WORKER_ID.")
@click.option("--datacenter-id", default=None, type=int, help="Datacenter id (0-31). Overrides IDWORKER_DATACENTER_ID.")
@click.option("--epoch", default=None, type=int, help="Custom epoch in milliseconds. Overrides IDWORKER_EPOCH.")
@click.option("--env-file", default=None, type=str, help="Path to a .env file.")
@click.option(
    "--log-level",
    default=None,
    type=click.Choice(["trace", "debug", "info", "warn", "error", "critical", "fatal"]),
)
@click.option("--json", "as_json", is_flag=True, default=False, help="Print decoded identifiers as JSON.")
def generate(
    count: int,
    worker_id: int | None,
    datacenter_id: int | None,
    epoch: int | None,
    env_file: str | None,
    log_level: str | None,
    as_json: bool,
):
    overrides = {
        name: value
        for name, value in {
            "IDWORKER_WORKER_ID": worker_id,
            "IDWORKER_DATACENTER_ID": datacenter_id,
            "IDWORKER_EPOCH": epoch,
            "IDWORKER_LOG_LEVEL": log_level,
        }.items()
        if value is not None
    }

    try:
        env = load_env(
            Env,
            env_file=env_file,
            override=Env(**overrides),
        )

    except ValueError as err:
        raise click.UsageError(str(err)) from err

    LoggingConfig().update(
        log_level=env.IDWORKER_LOG_LEVEL,
        log_output=env.IDWORKER_LOG_OUTPUT,
    )

    try:
        generator = SnowflakeGenerator(
            env.IDWORKER_WORKER_ID,
            env.IDWORKER_DATACENTER_ID,
            epoch=env.IDWORKER_EPOCH,
        )

    except ConfigurationError as err:
        raise click.UsageError(str(err)) from err

    try:
        ids = [generator.next_id() for _ in range(count)]

    except ClockRegressionError as err:
        raise click.ClickException(str(err)) from err

    if as_json:
        click.echo(
            msgspec.json.encode(
                [generator.parse(snowflake_id).to_dict() for snowflake_id in ids]
            ).decode()
        )

        return

    for snowflake_id in ids:
        click.echo(snowflake_id)
