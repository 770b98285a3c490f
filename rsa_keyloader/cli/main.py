import typer
from rsa_keyloader.cli.inspect_keys import inspect_command
from rsa_keyloader.cli.strategies import strategies_command

app = typer.Typer(help="rsa-keyloader CLI: load and inspect RSA key material from PEM files.")

app.command("inspect")(inspect_command)
app.command("strategies")(strategies_command)

def main():
    app()

if __name__ == "__main__":
    main()

"""
Command-Line Interface (CLI) Usage

inspect
Loads a public/private PEM key pair with one of the decoding strategies.

What it does:
- Reads both PEM files (only the first PEM block of each is used)
- Decodes the DER payloads with the chosen strategy
- Prints the key shape, modulus length and public key fingerprint

Paths and strategy default to the `keys:` section of config.yaml
(or the file named by RSA_KEYLOADER_CONFIG) when not given.

Examples:
rsa-keyloader inspect public.pem private.pem --strategy pkcs8
rsa-keyloader inspect public.pem rsa_private.pem --strategy pkcs1 --verify-pair
rsa-keyloader inspect --config config.yaml

strategies
Lists the supported decoding strategies.

Example:
rsa-keyloader strategies
"""
