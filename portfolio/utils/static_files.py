"""Static file helpers that add browser caching headers."""
import os

from fastapi.responses import FileResponse
from starlette.responses import Response
from starlette.staticfiles import StaticFiles


def cache_control(max_age: int) -> str:
    return f"public, max-age={max_age}"


def send_file_with_caching(directory: str, filename: str, max_age: int) -> FileResponse:
    """Serve a file from ``directory`` with a public Cache-Control header."""
    return FileResponse(
        os.path.join(directory, filename),
        headers={"Cache-Control": cache_control(max_age)},
    )


class CachedStaticFiles(StaticFiles):
    """``StaticFiles`` that marks every served asset as publicly cacheable."""

    def __init__(self, *args, max_age: int = 86400, **kwargs):
        super().__init__(*args, **kwargs)
        self.max_age = max_age

    def file_response(self, *args, **kwargs) -> Response:
        response = super().file_response(*args, **kwargs)
        response.headers.setdefault("Cache-Control", cache_control(self.max_age))
        return response
