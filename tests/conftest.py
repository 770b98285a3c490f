import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec, rsa


def _public_pem(key):
    return key.public_key().public_bytes(
        serialization.Encoding.PEM,
        serialization.PublicFormat.SubjectPublicKeyInfo,
    )


def _private_pem(key, fmt):
    return key.private_bytes(
        serialization.Encoding.PEM,
        fmt,
        serialization.NoEncryption(),
    )


@pytest.fixture(scope="session")
def rsa_key():
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture(scope="session")
def other_rsa_key():
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture(scope="session")
def ec_key():
    return ec.generate_private_key(ec.SECP256R1())


@pytest.fixture(scope="session")
def key_pems(rsa_key):
    """PEM encodings of the session RSA key, keyed by format name."""
    return {
        "public": _public_pem(rsa_key),
        "pkcs8": _private_pem(rsa_key, serialization.PrivateFormat.PKCS8),
        "pkcs1": _private_pem(rsa_key, serialization.PrivateFormat.TraditionalOpenSSL),
    }


@pytest.fixture(scope="session")
def key_ders(rsa_key):
    return {
        "public": rsa_key.public_key().public_bytes(
            serialization.Encoding.DER,
            serialization.PublicFormat.SubjectPublicKeyInfo,
        ),
        "pkcs8": rsa_key.private_bytes(
            serialization.Encoding.DER,
            serialization.PrivateFormat.PKCS8,
            serialization.NoEncryption(),
        ),
        "pkcs1": rsa_key.private_bytes(
            serialization.Encoding.DER,
            serialization.PrivateFormat.TraditionalOpenSSL,
            serialization.NoEncryption(),
        ),
    }


@pytest.fixture(scope="session")
def ec_ders(ec_key):
    return {
        "public": ec_key.public_key().public_bytes(
            serialization.Encoding.DER,
            serialization.PublicFormat.SubjectPublicKeyInfo,
        ),
        "pkcs8": ec_key.private_bytes(
            serialization.Encoding.DER,
            serialization.PrivateFormat.PKCS8,
            serialization.NoEncryption(),
        ),
    }


@pytest.fixture
def key_files(tmp_path, key_pems):
    """Write the session key to tmp_path; returns a dict of paths."""
    paths = {}
    for name, pem in key_pems.items():
        path = tmp_path / f"{name}.pem"
        path.write_bytes(pem)
        paths[name] = path
    return paths


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in (
        "RSA_KEYLOADER_CONFIG",
        "RSA_KEYLOADER_PUBLIC_KEY",
        "RSA_KEYLOADER_PRIVATE_KEY",
        "RSA_KEYLOADER_STRATEGY",
        "RSA_KEYLOADER_VERIFY_PAIR",
        "RSA_KEYLOADER_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
