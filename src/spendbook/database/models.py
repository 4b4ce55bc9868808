"""SQLAlchemy models for the spendbook database."""

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    String,
    create_engine,
)
from sqlalchemy.orm import Session, declarative_base, relationship, sessionmaker

Base = declarative_base()


class Account(Base):
    """Funding account model. Present in the schema, unused by the repositories."""

    __tablename__ = "accounts"

    id = Column(String, primary_key=True)
    name = Column(String, nullable=False)
    type = Column(String, nullable=True)
    currency = Column(String, nullable=False, default="USD")
    is_default = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime, nullable=False)
    updated_at = Column(DateTime, nullable=False)
    deleted_at = Column(DateTime, nullable=True)


class Category(Base):
    """Expense category model."""

    __tablename__ = "categories"

    id = Column(String, primary_key=True)
    name = Column(String, nullable=False)
    icon = Column(String, nullable=True)
    color_token = Column(String, nullable=True)
    sort_order = Column(Integer, nullable=False, default=0)
    is_archived = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime, nullable=False)
    updated_at = Column(DateTime, nullable=False)
    deleted_at = Column(DateTime, nullable=True)

    # Relationships
    expenses = relationship("Expense", back_populates="category")


class Expense(Base):
    """Expense model. Amounts are integer minor units."""

    __tablename__ = "expenses"

    id = Column(String, primary_key=True)
    amount_minor = Column(Integer, nullable=False)
    currency = Column(String, nullable=False, default="USD")
    category_id = Column(String, ForeignKey("categories.id"), nullable=False)
    occurred_at = Column(DateTime, nullable=False)
    note = Column(String, nullable=True)
    merchant = Column(String, nullable=True)
    payment_method = Column(String, nullable=True)
    created_at = Column(DateTime, nullable=False)
    updated_at = Column(DateTime, nullable=False)
    deleted_at = Column(DateTime, nullable=True)

    __table_args__ = (
        Index("idx_expenses_occurred_at", "occurred_at"),
        Index("idx_expenses_category_id", "category_id"),
        Index("idx_expenses_deleted_at", "deleted_at"),
    )

    # Relationships
    category = relationship("Category", back_populates="expenses")


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
