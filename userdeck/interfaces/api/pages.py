"""Landing page with the registration form."""

from pathlib import Path

from fastapi import APIRouter
from fastapi.responses import FileResponse

router = APIRouter(tags=["Pages"])

PUBLIC_DIR = Path(__file__).resolve().parent.parent.parent / "public"


@router.get("/", include_in_schema=False)
def index():
    return FileResponse(PUBLIC_DIR / "index.html", media_type="text/html")
