import os
from functools import lru_cache
from pathlib import Path

from fastapi import Depends

from praxis.site.loader import load_site_config
from praxis.site.models import SiteConfig


# --- Settings ---
class Settings:
    def __init__(self) -> None:
        self.base_dir = Path(os.getcwd())
        self.site_path = Path(os.environ.get("PRAXIS_SITE_PATH", self.base_dir / "site.yaml"))


@lru_cache
def get_settings() -> Settings:
    return Settings()


# --- Site Config ---
def get_site_config(settings: Settings = Depends(get_settings)) -> SiteConfig:
    return load_cached_site_config(settings.site_path)


@lru_cache
def load_cached_site_config(path: Path) -> SiteConfig:
    """Site config per path, read once. The app lifespan clears this on startup."""
    return load_site_config(path)
