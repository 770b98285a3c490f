"""RSA Keyloader - uniform loading of RSA key material from PEM/DER encodings."""

__version__ = "0.1.0"

from rsa_keyloader.crypto.errors import (
    DecodeError,
    DecodeErrorKind,
    InvalidStateError,
    KeyFileError,
    KeyHalf,
    KeyLoaderError,
    KeyPairMismatchError,
    MalformedStructureError,
    PemFormatError,
    TypeMismatchError,
)
from rsa_keyloader.crypto.key_material import KeyMaterial, KeyShape
from rsa_keyloader.crypto.loader import load_key_from_files, load_key_from_pem_bytes
from rsa_keyloader.crypto.strategies import DecodeStrategy

__all__ = [
    "DecodeError",
    "DecodeErrorKind",
    "DecodeStrategy",
    "InvalidStateError",
    "KeyFileError",
    "KeyHalf",
    "KeyLoaderError",
    "KeyMaterial",
    "KeyPairMismatchError",
    "KeyShape",
    "MalformedStructureError",
    "PemFormatError",
    "TypeMismatchError",
    "load_key_from_files",
    "load_key_from_pem_bytes",
    "__version__",
]
