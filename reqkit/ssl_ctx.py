"""Loading a CA certificate held in memory into an SSL context."""

from __future__ import annotations

import re
from typing import Any

_PEM_CERT = re.compile(
    r"-----BEGIN CERTIFICATE-----.*?-----END CERTIFICATE-----", re.DOTALL
)


def load_ca_cert_from_buffer(context: Any, cert_buffer: str | bytes) -> None:
    """Add the first PEM certificate in cert_buffer to the context's trusted CAs.

    Raises ValueError when an argument is missing or no certificate is found,
    and ssl.SSLError when the certificate cannot be read.
    """
    if context is None or cert_buffer is None:
        raise ValueError("invalid arguments: context and certificate buffer are required")
    text = cert_buffer.decode("ascii") if isinstance(cert_buffer, bytes) else cert_buffer
    match = _PEM_CERT.search(text)
    if match is None:
        raise ValueError("no PEM certificate found in buffer")
    context.load_verify_locations(cadata=match.group(0) + "\n")