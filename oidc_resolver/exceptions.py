from __future__ import annotations


class OidcResolverError(Exception):
    pass


class ArgumentError(OidcResolverError, ValueError):
    """Invalid argument passed to a public entry point."""

    def __init__(self, argument: str, message: str | None = None) -> None:
        self.argument = argument
        super().__init__(message or argument)


class RetrievalError(OidcResolverError):
    """A document could not be fetched."""

    def __init__(
        self,
        address: str,
        message: str,
        *,
        status_code: int | None = None,
    ) -> None:
        self.address = address
        self.status_code = status_code
        super().__init__(f"{message} (address={address})")


class OperationCancelledError(OidcResolverError):
    pass


class ConfigurationParseError(OidcResolverError):
    pass


class KeySetParseError(OidcResolverError):
    pass


class CertificateDecodingError(OidcResolverError):
    pass
