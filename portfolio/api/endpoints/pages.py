"""Routes for the public HTML pages.

Pages are plain files from the public directory, sent with a one day cache
header.
"""
from fastapi import APIRouter, Request
from fastapi.responses import FileResponse

from portfolio.utils.static_files import send_file_with_caching

router = APIRouter(include_in_schema=False)


def send_page(request: Request, filename: str) -> FileResponse:
    app_settings = request.app.state.settings
    return send_file_with_caching(
        app_settings.STATIC_DIR, filename, app_settings.STATIC_MAX_AGE
    )


@router.get("/")
async def index(request: Request):
    return send_page(request, "index.html")


@router.get("/about")
async def about(request: Request):
    return send_page(request, "about.html")


@router.get("/portfolio")
async def portfolio(request: Request):
    return send_page(request, "portfolio.html")


@router.get("/blog")
async def blog(request: Request):
    return send_page(request, "blog.html")


@router.get("/contact")
async def contact(request: Request):
    return send_page(request, "contact.html")
