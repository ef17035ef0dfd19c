import click
import msgspec

from idworker.snowflake import DEFAULT_EPOCH, Snowflake


@click.command(help="Decode an identifier into its fields.")
@click.argument("snowflake_id", type=int)
@click.option("--epoch", default=DEFAULT_EPOCH, type=int, show_default=True)
def decode(snowflake_id: int, epoch: int):
    try:
        snowflake = Snowflake.parse(snowflake_id, epoch=epoch)

    except ValueError as err:
        raise click.BadParameter(str(err), param_hint="SNOWFLAKE_ID") from err

    click.echo(msgspec.json.encode(snowflake.to_dict()).decode())
