import typer
from tabulate import tabulate

from rsa_keyloader.crypto.strategies import DecodeStrategy


def strategies_command():
    """
    List the supported decoding strategies and the encodings they expect.
    """
    rows = [
        {
            "strategy": strategy.value,
            "public": strategy.public_format or "-",
            "private": strategy.private_format or "-",
        }
        for strategy in DecodeStrategy
    ]
    typer.echo(tabulate(rows, headers="keys", tablefmt="psql"))
