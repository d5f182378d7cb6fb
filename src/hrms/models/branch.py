from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from hrms.database.base import Base
from .mixins import AuditMixin


class Branch(AuditMixin, Base):
    """
    SQLAlchemy model for a company branch (office / site).
    """
    __tablename__ = "hrms_m_branch_master"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    branch_name: Mapped[str] = mapped_column(String(150), nullable=False, index=True)

    branch_code: Mapped[str | None] = mapped_column(String(50), nullable=True, unique=True)

    location: Mapped[str | None] = mapped_column(String(150), nullable=True)

    address: Mapped[str | None] = mapped_column(String(255), nullable=True)

    contact_number: Mapped[str | None] = mapped_column(String(30), nullable=True)

    email: Mapped[str | None] = mapped_column(String(100), nullable=True)

    def __repr__(self) -> str:
        return f"<Branch(id={self.id!r}, branch_name={self.branch_name!r}, branch_code={self.branch_code!r})>"
