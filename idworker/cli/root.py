import click

from .decode import decode
from .generate import generate


@click.group(help="Generate and inspect 64-bit Snowflake identifiers.")
def idworker():
    pass


idworker.add_command(generate)
idworker.add_command(decode)


def run():
    idworker()
