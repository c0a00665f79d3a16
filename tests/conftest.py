# tests/conftest.py
import asyncio
import base64
import datetime

import pytest
from cryptography import x509
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import rsa
from cryptography.x509.oid import NameOID

from oidc_resolver.exceptions import RetrievalError
from oidc_resolver.retrieval.base import DocumentRetriever


class FakeRetriever(DocumentRetriever):
    """In-memory retriever; records every address it is asked for."""

    def __init__(self, documents: dict[str, str], *, delay: float = 0.0):
        self.documents = documents
        self.delay = delay
        self.calls: list[str] = []

    async def _fetch(self, address: str) -> str:
        self.calls.append(address)
        if self.delay:
            await asyncio.sleep(self.delay)
        if address not in self.documents:
            raise RetrievalError(address, "Not found", status_code=404)
        return self.documents[address]


def _self_signed(common_name: str):
    key = rsa.generate_private_key(public_exponent=65537, key_size=2048)
    name = x509.Name([x509.NameAttribute(NameOID.COMMON_NAME, common_name)])
    now = datetime.datetime.now(datetime.timezone.utc)
    cert = (
        x509.CertificateBuilder()
        .subject_name(name)
        .issuer_name(name)
        .public_key(key.public_key())
        .serial_number(x509.random_serial_number())
        .not_valid_before(now)
        .not_valid_after(now + datetime.timedelta(days=1))
        .sign(key, hashes.SHA256())
    )
    der = cert.public_bytes(serialization.Encoding.DER)
    return base64.b64encode(der).decode("ascii"), key


@pytest.fixture(scope="session")
def signing_cert():
    """(x5c entry, private key) for a self-signed RSA certificate."""
    return _self_signed("signing")


@pytest.fixture(scope="session")
def encryption_cert():
    return _self_signed("encryption")


@pytest.fixture
def fake_retriever():
    return FakeRetriever
