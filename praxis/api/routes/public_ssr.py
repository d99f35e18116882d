"""
Public SSR Routes - the landing page rendered on the server.

Each request builds a fresh document shell, mounts the composed page root
into it through the HTML render host and returns the result.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from praxis.adapters.html_host import HtmlDocument, HtmlRenderHost, build_document_shell
from praxis.api.deps import get_site_config
from praxis.components.bootstrap import init
from praxis.site.models import SiteConfig

router = APIRouter()


def render_landing_page(config: SiteConfig) -> str:
    """Mount the page root into a new document and return the full HTML."""
    document = HtmlDocument(build_document_shell(config))
    init(HtmlRenderHost(document), document, mount_id=config.mount.element_id)
    # init raises before this point if the mount element was missing
    assert document.mounted_html is not None
    return document.mounted_html


@router.get(
    "/",
    response_class=HTMLResponse,
    summary="Landing page SSR",
    description="Server-side rendered landing page.",
)
def ssr_landing(config: SiteConfig = Depends(get_site_config)) -> HTMLResponse:
    return HTMLResponse(content=render_landing_page(config), status_code=200)


@router.get("/health", summary="Health check")
def health() -> dict[str, str]:
    return {"status": "healthy"}
