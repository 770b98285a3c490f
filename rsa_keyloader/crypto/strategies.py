"""
strategies.py

Decoding strategies: one per supported combination of public and private
key encodings. Each strategy turns raw DER payloads (PEM armor already
stripped) into a KeyMaterial.
"""
from enum import Enum, unique
from typing import Optional

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa
from pyasn1.codec.der import decoder as der_decoder
from pyasn1.error import PyAsn1Error
from pyasn1.type import univ
from pyasn1_modules import rfc3447, rfc5208, rfc5280

from rsa_keyloader.crypto.errors import KeyHalf, MalformedStructureError, TypeMismatchError
from rsa_keyloader.crypto.key_material import KeyMaterial


def _check_structure(der: bytes, spec: univ.Sequence, half: KeyHalf, structure: str):
    """Raise MalformedStructureError unless `der` decodes exactly as `spec`."""
    try:
        _, rest = der_decoder.decode(der, asn1Spec=spec)
    except PyAsn1Error as e:
        raise MalformedStructureError(half, f"payload is not a {structure} structure: {e}") from e
    if rest:
        raise MalformedStructureError(half, f"{len(rest)} trailing bytes after {structure} structure")


def decode_pkix_public_key(der: bytes) -> rsa.RSAPublicKey:
    _check_structure(der, rfc5280.SubjectPublicKeyInfo(), KeyHalf.PUBLIC, "PKIX SubjectPublicKeyInfo")
    try:
        key = serialization.load_der_public_key(der)
    except UnsupportedAlgorithm as e:
        raise TypeMismatchError(KeyHalf.PUBLIC, f"unsupported key algorithm: {e}") from e
    except (ValueError, TypeError) as e:
        raise MalformedStructureError(KeyHalf.PUBLIC, f"cannot parse PKIX public key: {e}") from e
    if not isinstance(key, rsa.RSAPublicKey):
        raise TypeMismatchError(KeyHalf.PUBLIC, f"expected an RSA key, got {type(key).__name__}")
    return key


def _load_private_key(der: bytes, spec: univ.Sequence, structure: str) -> rsa.RSAPrivateKey:
    _check_structure(der, spec, KeyHalf.PRIVATE, structure)
    try:
        key = serialization.load_der_private_key(der, password=None)
    except UnsupportedAlgorithm as e:
        raise TypeMismatchError(KeyHalf.PRIVATE, f"unsupported key algorithm: {e}") from e
    except (ValueError, TypeError) as e:
        # TypeError: the key is encrypted and no password was given
        raise MalformedStructureError(KeyHalf.PRIVATE, f"cannot parse {structure} private key: {e}") from e
    if not isinstance(key, rsa.RSAPrivateKey):
        raise TypeMismatchError(KeyHalf.PRIVATE, f"expected an RSA key, got {type(key).__name__}")
    return key


def decode_pkcs8_private_key(der: bytes) -> rsa.RSAPrivateKey:
    return _load_private_key(der, rfc5208.PrivateKeyInfo(), "PKCS#8 PrivateKeyInfo")


def decode_pkcs1_private_key(der: bytes) -> rsa.RSAPrivateKey:
    # RSAPrivateKey is RSA-only, so other traditional keys (DSA, EC) fail here
    return _load_private_key(der, rfc3447.RSAPrivateKey(), "PKCS#1 RSAPrivateKey")


@unique
class DecodeStrategy(Enum):
    """
    Supported encoding combinations.

    The PKCS1 strategy still expects a PKIX public key; only the private
    half is PKCS#1.
    """
    PKCS8_PUBLIC = "pkcs8-public"
    PKCS8_PRIVATE = "pkcs8-private"
    PKCS8 = "pkcs8"
    PKCS1 = "pkcs1"

    @classmethod
    def from_name(cls, name: str) -> "DecodeStrategy":
        """Look up a strategy by member name or alias, e.g. 'PKCS8_PUBLIC' or 'pkcs8-public'."""
        normalized = name.strip().lower().replace("_", "-")
        for strategy in cls:
            if strategy.value == normalized:
                return strategy
        choices = ", ".join(s.value for s in cls)
        raise ValueError(f"Unknown decoding strategy '{name}'. Expected one of: {choices}")

    @property
    def needs_public(self) -> bool:
        return self is not DecodeStrategy.PKCS8_PRIVATE

    @property
    def needs_private(self) -> bool:
        return self is not DecodeStrategy.PKCS8_PUBLIC

    @property
    def public_format(self) -> Optional[str]:
        return "PKIX" if self.needs_public else None

    @property
    def private_format(self) -> Optional[str]:
        if self is DecodeStrategy.PKCS1:
            return "PKCS#1"
        return "PKCS#8" if self.needs_private else None

    def decode(self, public_der: Optional[bytes], private_der: Optional[bytes]) -> KeyMaterial:
        """
        Decode the DER payloads into KeyMaterial.

        Payloads for a half this strategy does not use are ignored and may
        be None. The public half is always decoded first.
        """
        if self.needs_public and public_der is None:
            raise ValueError(f"strategy {self.value} needs a public key payload")
        if self.needs_private and private_der is None:
            raise ValueError(f"strategy {self.value} needs a private key payload")

        if self is DecodeStrategy.PKCS8_PUBLIC:
            return KeyMaterial(public_key=decode_pkix_public_key(public_der))
        if self is DecodeStrategy.PKCS8_PRIVATE:
            return KeyMaterial(private_key=decode_pkcs8_private_key(private_der))
        if self is DecodeStrategy.PKCS8:
            public_key = decode_pkix_public_key(public_der)
            return KeyMaterial(public_key=public_key, private_key=decode_pkcs8_private_key(private_der))
        if self is DecodeStrategy.PKCS1:
            public_key = decode_pkix_public_key(public_der)
            return KeyMaterial(public_key=public_key, private_key=decode_pkcs1_private_key(private_der))
        raise NotImplementedError(f"no decoder for {self!r}")
