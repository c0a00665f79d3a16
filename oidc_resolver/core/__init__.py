from oidc_resolver.core.config import Settings, settings
from oidc_resolver.core.logging import configure_logging

__all__ = ["Settings", "settings", "configure_logging"]
