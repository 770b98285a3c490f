"""
key_material.py

Uniform view over RSA key material, whichever encoding produced it and
whichever half of the keypair was supplied.
"""
from dataclasses import dataclass
from enum import Enum, auto, unique
from typing import Optional

from cryptography.hazmat.primitives.asymmetric import rsa

from rsa_keyloader.crypto.errors import InvalidStateError


@unique
class KeyShape(Enum):
    PUBLIC_ONLY = auto()
    PRIVATE_ONLY = auto()
    BOTH = auto()
    NEITHER = auto()


@dataclass(frozen=True)
class KeyMaterial:
    """
    An optional RSA public key and an optional RSA private key.

    Both halves may be absent; such a value has shape NEITHER and every
    key query on it raises InvalidStateError.
    """
    public_key: Optional[rsa.RSAPublicKey] = None
    private_key: Optional[rsa.RSAPrivateKey] = None

    @property
    def shape(self) -> KeyShape:
        if self.public_key is not None and self.private_key is not None:
            return KeyShape.BOTH
        if self.private_key is not None:
            return KeyShape.PRIVATE_ONLY
        if self.public_key is not None:
            return KeyShape.PUBLIC_ONLY
        return KeyShape.NEITHER

    def modulus_length(self) -> int:
        """
        Byte length of the RSA modulus.

        The private key wins when both halves are present.
        """
        shape = self.shape
        if shape in (KeyShape.BOTH, KeyShape.PRIVATE_ONLY):
            key_size = self.private_key.key_size
        elif shape is KeyShape.PUBLIC_ONLY:
            key_size = self.public_key.key_size
        else:
            raise InvalidStateError("modulus requested but neither public nor private key is set")
        return (key_size + 7) // 8

    def resolved_public_key(self) -> rsa.RSAPublicKey:
        """Return the public key, deriving it from the private key if needed."""
        if self.public_key is not None:
            return self.public_key
        if self.private_key is not None:
            return self.private_key.public_key()
        raise InvalidStateError("public key requested but neither public nor private key is set")

    def is_matching_pair(self) -> bool:
        if self.shape is not KeyShape.BOTH:
            raise InvalidStateError(f"pair check needs both key halves, got {self.shape.name}")
        return self.private_key.public_key().public_numbers() == self.public_key.public_numbers()
