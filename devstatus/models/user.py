"""Sample users table."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from devstatus.core.database import Base


class User(Base):
    """Row in the sample database's users table."""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    username: Mapped[str] = mapped_column(String(50), nullable=False)
    email: Mapped[str] = mapped_column(String(100), nullable=False)
