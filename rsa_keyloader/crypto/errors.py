"""
errors.py

Error taxonomy for key loading and decoding.
"""
from enum import Enum
from typing import Optional


class KeyHalf(Enum):
    PUBLIC = "public"
    PRIVATE = "private"


class DecodeErrorKind(Enum):
    MALFORMED_STRUCTURE = "malformed_structure"
    TYPE_MISMATCH = "type_mismatch"


class KeyLoaderError(Exception):
    """Base class for every error raised by rsa_keyloader."""


class KeyFileError(KeyLoaderError):
    """A key file could not be opened or read. The OSError is chained as __cause__."""

    def __init__(self, half: KeyHalf, path: str, reason: str):
        super().__init__(f"cannot read {half.value} key file '{path}': {reason}")
        self.half = half
        self.path = path


class PemFormatError(KeyLoaderError):
    """No valid PEM block was found in the key data."""

    def __init__(self, half: KeyHalf):
        label = "publicKey" if half is KeyHalf.PUBLIC else "privateKey"
        super().__init__(f"{label} is not pem format")
        self.half = half


class DecodeError(KeyLoaderError):
    kind: Optional[DecodeErrorKind] = None

    def __init__(self, half: KeyHalf, message: str):
        super().__init__(f"{half.value} key: {message}")
        self.half = half


class MalformedStructureError(DecodeError):
    """The DER payload does not parse as the expected ASN.1 structure."""

    kind = DecodeErrorKind.MALFORMED_STRUCTURE


class TypeMismatchError(DecodeError):
    """The DER payload parses but does not hold an RSA key."""

    kind = DecodeErrorKind.TYPE_MISMATCH


class InvalidStateError(KeyLoaderError):
    """Key material was queried while neither key half is present."""


class KeyPairMismatchError(KeyLoaderError):
    """The public and private halves do not belong to the same RSA key."""
