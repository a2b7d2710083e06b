from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from storefront.data.models.user import UserModel
from storefront.domain.errors import AuthenticationError, ConflictError
from storefront.domain.schemas import TokenOut, UserLogin, UserRead, UserRegister
from storefront.repos.user_repo import UserRepo
from storefront.utils.logging import get_logger
from storefront.utils.security import (
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)

logger = get_logger(__name__)


class UserService:
    def __init__(self, db: Session, jwt_secret: str):
        self.repo = UserRepo(db)
        self.jwt_secret = jwt_secret

    def register(self, payload: UserRegister) -> UserRead:
        email = payload.email.lower()
        if self.repo.get_by_email(email):
            raise ConflictError("Email already registered")

        user = UserModel(
            name=payload.name,
            email=email,
            password_hash=hash_password(payload.password),
            role=payload.role,
        )
        try:
            created = self.repo.create_user(user)
        except IntegrityError:
            # lost a race against a concurrent registration
            self.repo.rollback()
            raise ConflictError("Email already registered")

        logger.info(f"Registered user {created.id}")
        return UserRead.model_validate(created)

    def login(self, payload: UserLogin) -> TokenOut:
        user = self.repo.get_by_email(payload.email.lower())
        hashed = user.password_hash if user else None

        if not verify_password(payload.password, hashed):
            raise AuthenticationError("Invalid credentials")

        token = create_access_token({"sub": user.id, "role": user.role}, self.jwt_secret)
        logger.info(f"Issued token for user {user.id}")
        return TokenOut(token=token)

    def current_user(self, token: str) -> UserRead:
        payload = decode_access_token(token, self.jwt_secret)
        user = self.repo.get_user(payload["sub"])
        if not user:
            raise AuthenticationError("Could not validate credentials")
        return UserRead.model_validate(user)
