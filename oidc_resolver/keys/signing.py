# oidc_resolver/keys/signing.py
from __future__ import annotations

import base64
import binascii
import hashlib

from cryptography import x509
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import padding, rsa

from oidc_resolver.exceptions import CertificateDecodingError

_RSA_HASHES = {
    "RS256": hashes.SHA256,
    "RS384": hashes.SHA384,
    "RS512": hashes.SHA512,
}


class X509SigningKey:
    """
    Signature verification key backed by a single leaf X.509 certificate.

    The certificate is not checked against any trust store; chain and
    validity-period checks belong to whoever consumes the key.
    """

    __slots__ = ("_certificate", "_thumbprint")

    def __init__(self, certificate: x509.Certificate) -> None:
        self._certificate = certificate
        der = certificate.public_bytes(serialization.Encoding.DER)
        self._thumbprint = (
            base64.urlsafe_b64encode(hashlib.sha1(der).digest()).rstrip(b"=").decode("ascii")
        )

    @classmethod
    def from_base64_der(cls, value: str) -> "X509SigningKey":
        """Build a key from one ``x5c`` entry (standard base64 of DER bytes)."""
        try:
            der = base64.b64decode("".join(value.split()), validate=True)
        except (binascii.Error, ValueError) as exc:
            raise CertificateDecodingError(f"Certificate is not valid base64: {exc}") from exc

        try:
            certificate = x509.load_der_x509_certificate(der)
        except ValueError as exc:
            raise CertificateDecodingError(f"Malformed X.509 certificate: {exc}") from exc

        return cls(certificate)

    @property
    def certificate(self) -> x509.Certificate:
        return self._certificate

    @property
    def public_key(self):
        return self._certificate.public_key()

    @property
    def thumbprint(self) -> str:
        """SHA-1 thumbprint, base64url without padding (the JWK ``x5t`` form)."""
        return self._thumbprint

    @property
    def key_id(self) -> str:
        return self._thumbprint

    def verify(self, signature: bytes, data: bytes, algorithm: str = "RS256") -> None:
        """
        Verify an RSASSA-PKCS1-v1_5 signature.

        Raises:
            cryptography.exceptions.InvalidSignature: signature does not match
            ValueError: unsupported algorithm
            TypeError: certificate does not carry an RSA key
        """
        hash_cls = _RSA_HASHES.get(algorithm)
        if hash_cls is None:
            raise ValueError(f"Unsupported signature algorithm '{algorithm}'")

        key = self.public_key
        if not isinstance(key, rsa.RSAPublicKey):
            raise TypeError(f"Certificate key is {type(key).__name__}, expected RSA")

        key.verify(signature, data, padding.PKCS1v15(), hash_cls())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, X509SigningKey):
            return NotImplemented
        return self._certificate == other._certificate

    def __hash__(self) -> int:
        return hash(self._thumbprint)

    def __repr__(self) -> str:
        return f"X509SigningKey(subject={self._certificate.subject.rfc4514_string()!r}, x5t={self._thumbprint!r})"
