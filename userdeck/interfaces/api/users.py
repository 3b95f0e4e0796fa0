"""User routes: register a user with an optional photo, list all users."""

from dataclasses import dataclass
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, HTTPException, Request, UploadFile, status
from fastapi.responses import HTMLResponse, RedirectResponse

from userdeck.application.services.user_service import list_users, register_user
from userdeck.domain.repositories.user_repository import UserRepository
from userdeck.domain.schemas.user import UserCreate
from userdeck.infrastructure.storage import PhotoStorage
from userdeck.interfaces.deps import get_storage, get_user_repository
from userdeck.rendering.templates import render_users

router = APIRouter(prefix="/users", tags=["Users"])


@dataclass
class UserSubmission:
    name: Optional[str]
    email: Optional[str]
    photo: Optional[UploadFile] = None


async def read_submission(
    request: Request,
    name: Optional[str] = Form(None),
    email: Optional[str] = Form(None),
    photo: Optional[UploadFile] = File(None),
) -> UserSubmission:
    """Form fields (urlencoded or multipart), or a JSON object without a photo."""
    content_type = request.headers.get("content-type", "")
    if not content_type.startswith("application/json"):
        return UserSubmission(name=name, email=email, photo=photo)

    try:
        payload = UserCreate.model_validate(await request.json())
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid JSON body") from exc
    return UserSubmission(name=payload.name, email=payload.email)


@router.post("")
def create_user(
    submission: UserSubmission = Depends(read_submission),
    repo: UserRepository = Depends(get_user_repository),
    storage: PhotoStorage = Depends(get_storage),
):
    register_user(
        repo,
        storage,
        name=submission.name,
        email=submission.email,
        photo=submission.photo,
    )
    return RedirectResponse("/users", status_code=status.HTTP_302_FOUND)


@router.get("", response_class=HTMLResponse)
def users_page(repo: UserRepository = Depends(get_user_repository)):
    return HTMLResponse(render_users(list_users(repo)))
