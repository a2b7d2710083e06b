# storefront/api/routers/auth.py
from fastapi import APIRouter, Depends, Request
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from storefront.api.errors import translate_errors
from storefront.data.database import get_db
from storefront.domain.schemas import TokenOut, UserLogin, UserRead, UserRegister
from storefront.services.user_service import UserService

router = APIRouter(prefix="/auth", tags=["auth"])

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="auth/login")


def get_service(request: Request, db: Session = Depends(get_db)) -> UserService:
    return UserService(db, jwt_secret=request.app.state.jwt_secret)


@router.post("/register", response_model=UserRead, status_code=201)
def register(payload: UserRegister, svc: UserService = Depends(get_service)):
    with translate_errors():
        return svc.register(payload)


@router.post("/login", response_model=TokenOut)
def login(payload: UserLogin, svc: UserService = Depends(get_service)):
    with translate_errors():
        return svc.login(payload)


@router.get("/me", response_model=UserRead)
def me(token: str = Depends(oauth2_scheme), svc: UserService = Depends(get_service)):
    with translate_errors():
        return svc.current_user(token)
