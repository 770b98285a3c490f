"""
loader.py

Loads RSA key material from PEM-armored files (or in-memory PEM data)
using one of the decoding strategies.
"""
import os
from pathlib import Path
from typing import Optional, Union

from rsa_keyloader.crypto.errors import (
    DecodeError,
    KeyFileError,
    KeyHalf,
    KeyPairMismatchError,
    PemFormatError,
)
from rsa_keyloader.crypto.key_material import KeyMaterial, KeyShape
from rsa_keyloader.crypto.pem import decode_pem_block
from rsa_keyloader.crypto.strategies import DecodeStrategy
from rsa_keyloader.utils.logger import get_logger

logger = get_logger("rsa_keyloader.loader")

PathArg = Optional[Union[str, "os.PathLike[str]"]]
PemArg = Optional[Union[bytes, str]]


def _read_key_file(path, half: KeyHalf) -> bytes:
    path = os.fspath(path).strip()
    logger.debug(f"Reading {half.value} key file {path}")
    try:
        return Path(path).read_bytes()
    except OSError as e:
        logger.warning(f"Cannot read {half.value} key file {path}: {e}")
        raise KeyFileError(half, path, e.strerror or str(e)) from e


def _pem_payload(data: Union[bytes, str], half: KeyHalf) -> bytes:
    block = decode_pem_block(data)
    if block is None:
        logger.warning(f"No PEM block found in {half.value} key data")
        raise PemFormatError(half)
    logger.debug(f"Found {half.value} PEM block '{block.label}' ({len(block.payload)} bytes)")
    return block.payload


def _check_required(strategy: DecodeStrategy, public, private):
    if strategy.needs_public and public is None:
        raise ValueError(f"strategy {strategy.value} needs a public key")
    if strategy.needs_private and private is None:
        raise ValueError(f"strategy {strategy.value} needs a private key")


def _decode(strategy: DecodeStrategy, public_der: Optional[bytes], private_der: Optional[bytes],
            verify_pair: bool) -> KeyMaterial:
    try:
        material = strategy.decode(public_der, private_der)
    except DecodeError as e:
        logger.warning(f"Decoding with strategy {strategy.value} failed: {e}")
        raise

    if verify_pair and material.shape is KeyShape.BOTH and not material.is_matching_pair():
        logger.warning(f"Public and private keys do not form a pair (strategy {strategy.value})")
        raise KeyPairMismatchError("public key does not match private key")

    logger.info(
        f"Loaded RSA key material: shape={material.shape.name}, "
        f"modulus={material.modulus_length()} bytes (strategy {strategy.value})"
    )
    return material


def load_key_from_files(
    public_path: PathArg,
    private_path: PathArg,
    strategy: DecodeStrategy,
    verify_pair: bool = False,
) -> KeyMaterial:
    """
    Load key material from a public and a private PEM file.

    Both files are read and PEM-decoded (first block only), then the DER
    payloads are handed to `strategy`. A path may be None when the strategy
    does not use that half; a path that is given is always read and must
    hold a PEM block, even if the strategy ignores it.

    Raises:
        KeyFileError: a file cannot be read.
        PemFormatError: a file holds no valid PEM block.
        MalformedStructureError / TypeMismatchError: the strategy failed.
        KeyPairMismatchError: verify_pair is set and the halves differ.
        ValueError: a path the strategy needs is None.
    """
    _check_required(strategy, public_path, private_path)

    public_der = None
    if public_path is not None:
        public_der = _pem_payload(_read_key_file(public_path, KeyHalf.PUBLIC), KeyHalf.PUBLIC)

    private_der = None
    if private_path is not None:
        private_der = _pem_payload(_read_key_file(private_path, KeyHalf.PRIVATE), KeyHalf.PRIVATE)

    return _decode(strategy, public_der, private_der, verify_pair)


def load_key_from_pem_bytes(
    public_pem: PemArg,
    private_pem: PemArg,
    strategy: DecodeStrategy,
    verify_pair: bool = False,
) -> KeyMaterial:
    """Same pipeline as load_key_from_files, for PEM data already in memory."""
    _check_required(strategy, public_pem, private_pem)

    public_der = _pem_payload(public_pem, KeyHalf.PUBLIC) if public_pem is not None else None
    private_der = _pem_payload(private_pem, KeyHalf.PRIVATE) if private_pem is not None else None

    return _decode(strategy, public_der, private_der, verify_pair)
