from oidc_resolver.retrieval.base import DocumentRetriever
from oidc_resolver.retrieval.http import GenericDocumentRetriever, HttpDocumentRetriever

__all__ = ["DocumentRetriever", "GenericDocumentRetriever", "HttpDocumentRetriever"]
