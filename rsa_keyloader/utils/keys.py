import hashlib

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa

from rsa_keyloader.crypto.key_material import KeyMaterial


def public_key_fingerprint(public_key: rsa.RSAPublicKey) -> str:
    # SHA256 hex digest of the DER SubjectPublicKeyInfo (stable fingerprint)
    der = public_key.public_bytes(
        serialization.Encoding.DER,
        serialization.PublicFormat.SubjectPublicKeyInfo,
    )
    return hashlib.sha256(der).hexdigest()


def key_material_fingerprint(material: KeyMaterial) -> str:
    """Fingerprint of the public half, derived from the private key if only that is loaded."""
    return public_key_fingerprint(material.resolved_public_key())
