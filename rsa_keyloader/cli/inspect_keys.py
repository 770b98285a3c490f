"""
inspect_keys.py

CLI command to load a key pair and report what was loaded.
"""
from typing import Optional

import typer
from rich.console import Console

from rsa_keyloader.crypto.errors import KeyLoaderError
from rsa_keyloader.crypto.loader import load_key_from_files
from rsa_keyloader.crypto.strategies import DecodeStrategy
from rsa_keyloader.utils.config import get_key_config
from rsa_keyloader.utils.keys import key_material_fingerprint

console = Console()


def inspect_command(
    public_path: Optional[str] = typer.Argument(None, help="Path to the PEM public key file (the private key file when it is the only path and the strategy is pkcs8-private)."),
    private_path: Optional[str] = typer.Argument(None, help="Path to the PEM private key file."),
    strategy: Optional[str] = typer.Option(None, "--strategy", "-s", help="Decoding strategy: pkcs8-public, pkcs8-private, pkcs8 or pkcs1."),
    verify_pair: bool = typer.Option(False, "--verify-pair", help="Fail if the public and private keys are not a pair."),
    config_path: Optional[str] = typer.Option(None, "--config", help="YAML config providing key paths and strategy."),
):
    """
    Load RSA key material and print its shape, modulus length and fingerprint.
    """
    cfg = {}
    if config_path or (public_path is None and private_path is None):
        try:
            cfg = get_key_config(config_path)
        except FileNotFoundError as e:
            console.print(f"[bold red]ERROR: {e}[/bold red]")
            raise typer.Exit(code=1)

    try:
        decode_strategy = DecodeStrategy.from_name(strategy or cfg.get("strategy") or DecodeStrategy.PKCS8.value)
    except ValueError as e:
        console.print(f"[bold red]ERROR: {e}[/bold red]")
        raise typer.Exit(code=1)

    if public_path is None and private_path is None:
        public_path = cfg.get("public_key_path")
        private_path = cfg.get("private_key_path")
    elif private_path is None and not decode_strategy.needs_public:
        # a single path given to a private-only strategy is the private key
        public_path, private_path = None, public_path

    console.print(f"Loading keys with strategy [bold cyan]{decode_strategy.value}[/]...")
    try:
        material = load_key_from_files(
            public_path,
            private_path,
            decode_strategy,
            verify_pair=verify_pair or cfg.get("verify_pair", False),
        )
    except (KeyLoaderError, ValueError) as e:
        console.print(f"[bold red]ERROR: {e}[/bold red]")
        raise typer.Exit(code=1)

    modulus = material.modulus_length()
    console.print(f"  - Shape: [bold]{material.shape.name}[/bold]")
    console.print(f"  - Modulus: {modulus} bytes ({modulus * 8} bits)")
    console.print(f"  - Fingerprint (SHA-256, SPKI): {key_material_fingerprint(material)}", soft_wrap=True)
    console.print("[green]Key material loaded successfully.[/green]")
