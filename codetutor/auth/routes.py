"""Auth endpoints: register, login, current user."""

from datetime import datetime

from fastapi import APIRouter, Depends
from pydantic import EmailStr, Field
from sqlalchemy.orm import Session

from codetutor.auth import service
from codetutor.auth.dependencies import CurrentUser, get_current_user
from codetutor.config.settings import Settings
from codetutor.context import get_db, get_settings
from codetutor.utils.validators import CamelModel

router = APIRouter(prefix="/api/auth", tags=["Auth"])


# --- Request / Response schemas ---

class CredentialsRequest(CamelModel):
    email: EmailStr
    password: str = Field(min_length=1)


class AuthResponse(CamelModel):
    user_id: int
    token: str
    email: str


class UserResponse(CamelModel):
    id: int
    email: str
    created_at: datetime


# --- Endpoints ---

@router.post("/register", status_code=201, response_model=AuthResponse, summary="Register a new user", description="Create a new user account and return an identity token.")
async def register(body: CredentialsRequest, db: Session = Depends(get_db), settings: Settings = Depends(get_settings)):
    user, token = service.register_user(db, body.email, body.password, settings)
    return AuthResponse(user_id=user.id, token=token, email=user.email)


@router.post("/login", response_model=AuthResponse, summary="Login", description="Authenticate with email and password and return an identity token.")
async def login(body: CredentialsRequest, db: Session = Depends(get_db), settings: Settings = Depends(get_settings)):
    user, token = service.authenticate_user(db, body.email, body.password, settings)
    return AuthResponse(user_id=user.id, token=token, email=user.email)


@router.get("/me", response_model=UserResponse, summary="Current user")
async def me(user: CurrentUser = Depends(get_current_user), db: Session = Depends(get_db)):
    return service.get_user(db, user.id)
