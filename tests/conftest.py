from pathlib import Path

import pytest

from praxis.site.models import SiteConfig

SITE_YAML = """\
site:
  title: Praxis Test
  description: Test landing page.
  lang: en
mount:
  element_id: app
stylesheets:
  - https://unpkg.com/open-props
logging:
  level: DEBUG
"""


@pytest.fixture
def site_path(tmp_path: Path) -> Path:
    """A valid site file in a temp dir."""
    path = tmp_path / "site.yaml"
    path.write_text(SITE_YAML)
    return path


@pytest.fixture
def site_config() -> SiteConfig:
    """Default site configuration."""
    return SiteConfig()
