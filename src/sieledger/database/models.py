"""SQLAlchemy models for sieledger database."""

from datetime import datetime, UTC
from sqlalchemy import (
    Column,
    Integer,
    String,
    ForeignKey,
    DateTime,
    UniqueConstraint,
    create_engine,
)
from sqlalchemy.orm import declarative_base, relationship, sessionmaker, Session

Base = declarative_base()


class Account(Base):
    """Chart of accounts entry."""

    __tablename__ = "accounts"

    number = Column(String, primary_key=True)
    type = Column(String(1), nullable=False)
    name = Column(String, nullable=False)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)


class Template(Base):
    """Verification template model."""

    __tablename__ = "templates"

    id = Column(String(6), primary_key=True)
    name = Column(String(20), nullable=False, default="")
    text = Column(String(60), nullable=False, default="")
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    # Relationships
    transactions = relationship(
        "TemplateTransaction",
        back_populates="template",
        cascade="all, delete-orphan",
        order_by="TemplateTransaction.position",
    )


class TemplateTransaction(Base):
    """Account and amount pattern of a template."""

    __tablename__ = "template_transactions"

    id = Column(Integer, primary_key=True)
    template_id = Column(String(6), ForeignKey("templates.id"), nullable=False)
    position = Column(Integer, nullable=False)
    account_pattern = Column(String, nullable=False)
    amount_pattern = Column(String, nullable=False)

    __table_args__ = (
        UniqueConstraint("template_id", "position", name="uq_template_position"),
    )

    # Relationships
    template = relationship("Template", back_populates="transactions")


class Setting(Base):
    """Key/value ledger setting."""

    __tablename__ = "settings"

    key = Column(String, primary_key=True)
    value = Column(String, nullable=False)


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
