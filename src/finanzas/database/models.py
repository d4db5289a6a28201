"""SQLAlchemy models for finanzas database."""

from datetime import datetime, UTC
from sqlalchemy import (
    Column,
    Integer,
    String,
    DateTime,
    Numeric,
    Enum,
    CheckConstraint,
    create_engine,
)
from sqlalchemy.orm import declarative_base, sessionmaker, Session

from finanzas.domain.entities import TransactionType

Base = declarative_base()


def _utcnow() -> datetime:
    # Stored naive; SQLite has no timezone-aware column type
    return datetime.now(UTC).replace(tzinfo=None)


class Transaction(Base):
    """Income or expense model."""

    __tablename__ = "transactions"

    id = Column(Integer, primary_key=True)
    type = Column(
        Enum(TransactionType, values_callable=lambda e: [m.value for m in e], name="transaction_type"),
        nullable=False,
    )
    amount = Column(Numeric(12, 2), nullable=False)
    description = Column(String, nullable=False, default="")
    created_at = Column(DateTime, default=_utcnow, nullable=False)
    # Record id in the backend an entry was imported from
    external_id = Column(String, nullable=True, unique=True)

    __table_args__ = (CheckConstraint("amount >= 0", name="ck_transaction_amount"),)


class FixedExpense(Base):
    """Recurring monthly expense model."""

    __tablename__ = "fixed_expenses"

    id = Column(Integer, primary_key=True)
    description = Column(String, nullable=False)
    amount = Column(Numeric(12, 2), nullable=False)
    created_at = Column(DateTime, default=_utcnow, nullable=False)
    external_id = Column(String, nullable=True, unique=True)

    __table_args__ = (CheckConstraint("amount >= 0", name="ck_fixed_expense_amount"),)


class Credit(Base):
    """Installment purchase model."""

    __tablename__ = "credits"

    id = Column(Integer, primary_key=True)
    description = Column(String, nullable=False)
    total_amount = Column(Numeric(12, 2), nullable=False)
    installments = Column(Integer, nullable=False)
    start_month = Column(Integer, nullable=False)
    start_year = Column(Integer, nullable=False)
    installment_amount = Column(Numeric(12, 2), nullable=False)
    created_at = Column(DateTime, default=_utcnow, nullable=False)
    external_id = Column(String, nullable=True, unique=True)

    __table_args__ = (
        CheckConstraint("installments > 0", name="ck_credit_installments"),
        CheckConstraint("start_month >= 0 AND start_month <= 11", name="ck_credit_start_month"),
    )


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
