"""SQLAlchemy models for bankrec database."""

from datetime import datetime, UTC
from sqlalchemy import (
    Column,
    Integer,
    String,
    ForeignKey,
    DateTime,
    Date,
    Numeric,
    Boolean,
    UniqueConstraint,
    create_engine,
)
from sqlalchemy.orm import declarative_base, relationship, sessionmaker, Session

Base = declarative_base()


def _utcnow() -> datetime:
    return datetime.now(UTC)


class BankAccount(Base):
    """Bank account model."""

    __tablename__ = "accounts"

    id = Column(Integer, primary_key=True)
    user_id = Column(String, nullable=False, index=True)
    name = Column(String, nullable=False)
    bank_name = Column(String, nullable=False)
    account_type = Column(String, default="checking", nullable=False)
    currency = Column(String(3), default="USD", nullable=False)
    is_active = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime, default=_utcnow, nullable=False)

    __table_args__ = (UniqueConstraint("user_id", "name", name="uq_user_account_name"),)

    # Relationships
    transactions = relationship(
        "BankTransaction", back_populates="account", cascade="all, delete-orphan"
    )


class BankTransaction(Base):
    """Imported bank transaction model."""

    __tablename__ = "bank_transactions"

    id = Column(Integer, primary_key=True)
    bank_account_id = Column(Integer, ForeignKey("accounts.id"), nullable=False, index=True)
    user_id = Column(String, nullable=False, index=True)
    transaction_date = Column(Date, nullable=False)
    description = Column(String, nullable=False)
    reference = Column(String, nullable=True)
    amount = Column(Numeric(12, 2), nullable=False)
    type = Column(String(6), nullable=False)
    balance = Column(Numeric(12, 2), nullable=True)
    category = Column(String, nullable=True)
    merchant = Column(String, nullable=True)
    is_reconciled = Column(Boolean, default=False, nullable=False)
    notes = Column(String, nullable=True)
    created_at = Column(DateTime, default=_utcnow, nullable=False)
    updated_at = Column(DateTime, default=_utcnow, onupdate=_utcnow, nullable=False)

    # Relationships
    account = relationship("BankAccount", back_populates="transactions")


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
