from oidc_resolver.exceptions import (
    ArgumentError,
    CertificateDecodingError,
    ConfigurationParseError,
    KeySetParseError,
    OidcResolverError,
    OperationCancelledError,
    RetrievalError,
)
from oidc_resolver.keys import X509SigningKey
from oidc_resolver.models import JsonWebKey, JsonWebKeySet, OpenIdConnectConfiguration
from oidc_resolver.retrieval import (
    DocumentRetriever,
    GenericDocumentRetriever,
    HttpDocumentRetriever,
)
from oidc_resolver.contracts import ConfigurationRetriever
from oidc_resolver.resolver import (
    OpenIdConnectConfigurationRetriever,
    get_configuration,
    get_configuration_from_address,
    get_configuration_with_client,
)

__all__ = [
    "ArgumentError",
    "CertificateDecodingError",
    "ConfigurationParseError",
    "ConfigurationRetriever",
    "DocumentRetriever",
    "GenericDocumentRetriever",
    "HttpDocumentRetriever",
    "JsonWebKey",
    "JsonWebKeySet",
    "KeySetParseError",
    "OidcResolverError",
    "OpenIdConnectConfiguration",
    "OpenIdConnectConfigurationRetriever",
    "OperationCancelledError",
    "RetrievalError",
    "X509SigningKey",
    "get_configuration",
    "get_configuration_from_address",
    "get_configuration_with_client",
]
