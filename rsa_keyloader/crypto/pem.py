"""
pem.py

Extraction of the first PEM block from armored key data.
"""
import base64
import binascii
import re
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple, Union

_PEM_BLOCK_RE = re.compile(
    rb"^-----BEGIN (?P<label>[^\r\n]*?)-----[ \t]*\r?\n"
    rb"(?P<body>.*?)"
    rb"^-----END (?P=label)-----[ \t]*\r?$",
    re.MULTILINE | re.DOTALL,
)


@dataclass(frozen=True)
class PemBlock:
    label: str
    payload: bytes
    headers: Dict[str, str] = field(default_factory=dict)


def _split_headers(lines: List[bytes]) -> Tuple[Dict[str, str], List[bytes]]:
    """Separate RFC 1421 'Key: value' header lines from the base64 body."""
    headers = {}
    idx = 0
    while idx < len(lines) and b":" in lines[idx]:
        key, value = lines[idx].split(b":", 1)
        headers[key.strip().decode("ascii", "replace")] = value.strip().decode("ascii", "replace")
        idx += 1
    if headers and idx < len(lines) and not lines[idx].strip():
        idx += 1
    return headers, lines[idx:]


def decode_pem_block(data: Union[bytes, str]) -> Optional[PemBlock]:
    """
    Return the first well-formed PEM block in `data`, or None.

    Anything before the first block is ignored. Blocks whose body is not
    valid base64 are skipped. The block label is reported but not checked.
    """
    if isinstance(data, str):
        data = data.encode("utf-8")
    elif not isinstance(data, bytes):
        raise TypeError("PEM data must either be bytes or str")

    for match in _PEM_BLOCK_RE.finditer(data):
        headers, body_lines = _split_headers(match.group("body").splitlines())
        body = b"".join(b"".join(body_lines).split())
        try:
            payload = base64.b64decode(body, validate=True)
        except (binascii.Error, ValueError):
            continue
        return PemBlock(
            label=match.group("label").decode("ascii", "replace"),
            payload=payload,
            headers=headers,
        )
    return None
