"""User service: sign-up, credential checks and profile updates."""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from mesto.errors import ConflictError, NotFoundError, UnauthorizedError
from mesto.models.user import User
from mesto.services.auth import get_password_hash, verify_password

logger = logging.getLogger(__name__)


class UserService:
    """Service for user-related operations."""

    def __init__(self, db: Session):
        self.db = db

    def list_users(self) -> list[User]:
        return self.db.query(User).order_by(User.created_at).all()

    def get_user(self, user_id: str) -> User:
        """Get a user by id or raise NotFoundError."""
        user = self.db.get(User, user_id)
        if user is None:
            raise NotFoundError("Requested user not found")
        return user

    def get_user_by_email(self, email: str) -> User | None:
        return self.db.query(User).filter(User.email == email).first()

    def create_user(
        self,
        email: str,
        password: str,
        name: str | None = None,
        about: str | None = None,
        avatar: str | None = None,
    ) -> User:
        """Create a new user, hashing the password before it is stored.

        Omitted profile fields fall back to the model defaults.
        """
        profile = {
            key: value
            for key, value in {"name": name, "about": about, "avatar": avatar}.items()
            if value is not None
        }
        user = User(email=email, password_hash=get_password_hash(password), **profile)
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            logger.info(f"Sign-up rejected, email already registered: {email}")
            raise ConflictError("A user with this email already exists") from e
        self.db.refresh(user)
        logger.info(f"Created user {user.id}")
        return user

    def authenticate(self, email: str, password: str) -> User:
        """Authenticate a user by email and password."""
        user = self.get_user_by_email(email)
        if user is None or not verify_password(password, user.password_hash):
            raise UnauthorizedError("Incorrect email or password")
        return user

    def update_profile(self, user_id: str, name: str, about: str) -> User:
        """Update name and about of an existing user. Never creates a record."""
        user = self.get_user(user_id)
        user.name = name
        user.about = about
        self.db.commit()
        self.db.refresh(user)
        return user

    def update_avatar(self, user_id: str, avatar: str) -> User:
        """Update the avatar of an existing user. Never creates a record."""
        user = self.get_user(user_id)
        user.avatar = avatar
        self.db.commit()
        self.db.refresh(user)
        return user
