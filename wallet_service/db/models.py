"""SQLAlchemy ORM models."""
import uuid

from sqlalchemy import Column, DateTime, String
from sqlalchemy.sql import func

from wallet_service.infrastructure.database.base import Base


def generate_uuid() -> str:
    return str(uuid.uuid4())


class User(Base):
    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    phone_number = Column(String(32), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())


class Wallet(Base):
    __tablename__ = "wallets"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    name = Column(String(100), unique=True, nullable=False)
    type = Column(String(10), nullable=False)
    account_number = Column(String(64), unique=True, nullable=False)
    account_scheme = Column(String(20), nullable=False)
    owner = Column(String(32), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), index=True)
