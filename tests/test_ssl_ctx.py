import ssl

import pytest

from reqkit.ssl_ctx import load_ca_cert_from_buffer

FIRST = "-----BEGIN CERTIFICATE-----\nQUJD\n-----END CERTIFICATE-----"
SECOND = "-----BEGIN CERTIFICATE-----\nREVG\n-----END CERTIFICATE-----"


class RecordingContext:
    def __init__(self):
        self.loaded = []

    def load_verify_locations(self, cafile=None, capath=None, cadata=None):
        self.loaded.append(cadata)


def test_loads_first_certificate_only():
    context = RecordingContext()
    load_ca_cert_from_buffer(context, "junk\n" + FIRST + "\n" + SECOND + "\n")
    assert len(context.loaded) == 1
    assert context.loaded[0].strip() == FIRST


def test_accepts_bytes():
    context = RecordingContext()
    load_ca_cert_from_buffer(context, FIRST.encode("ascii"))
    assert context.loaded[0].strip() == FIRST


@pytest.mark.parametrize("args", [(None, FIRST), (RecordingContext(), None)])
def test_missing_arguments_raise(args):
    with pytest.raises(ValueError):
        load_ca_cert_from_buffer(*args)


def test_buffer_without_certificate_raises():
    context = RecordingContext()
    with pytest.raises(ValueError):
        load_ca_cert_from_buffer(context, "not a certificate")
    assert context.loaded == []


def test_unreadable_certificate_raises_ssl_error():
    context = ssl.SSLContext(ssl.PROTOCOL_TLS_CLIENT)
    before = context.cert_store_stats()["x509_ca"]
    with pytest.raises(ssl.SSLError):
        load_ca_cert_from_buffer(context, FIRST)
    assert context.cert_store_stats()["x509_ca"] == before