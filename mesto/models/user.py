"""User model."""

from sqlalchemy import Column, String

from mesto.database import Base
from mesto.models.mixins import ObjectIdMixin, TimestampMixin

DEFAULT_NAME = "Jacques-Yves Cousteau"
DEFAULT_ABOUT = "Explorer"
DEFAULT_AVATAR = "https://pictures.s3.yandex.net/resources/jacques-cousteau_1604399756.png"


class User(Base, ObjectIdMixin, TimestampMixin):
    """User model for authentication and card ownership."""

    __tablename__ = "users"

    name = Column(String(30), nullable=False, default=DEFAULT_NAME)
    about = Column(String(30), nullable=False, default=DEFAULT_ABOUT)
    avatar = Column(String(2048), nullable=False, default=DEFAULT_AVATAR)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
