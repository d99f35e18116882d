"""Site configuration: YAML file validated with pydantic."""

from praxis.site.loader import load_site_config
from praxis.site.models import LoggingConfig, MountConfig, SiteConfig, SiteInfo

__all__ = [
    "load_site_config",
    "LoggingConfig",
    "MountConfig",
    "SiteConfig",
    "SiteInfo",
]
