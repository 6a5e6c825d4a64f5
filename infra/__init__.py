from .config import SiteConfig
from .static_site import StaticSite
from .static_site_stack import StaticSiteStack
from .utilities import ConfigurationError

__all__ = ["ConfigurationError", "SiteConfig", "StaticSite", "StaticSiteStack"]
