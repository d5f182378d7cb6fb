from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from hrms.database.base import Base
from .mixins import AuditMixin


class Module(AuditMixin, Base):
    """
    Reference data naming an HRMS module (payroll, attendance, recruitment, ...)
    that other records can be related to.
    """
    __tablename__ = "hrms_m_module"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    module_name: Mapped[str] = mapped_column(String(100), nullable=False, index=True)

    description: Mapped[str | None] = mapped_column(String(255), nullable=True)

    def __repr__(self) -> str:
        return f"<Module(id={self.id!r}, module_name={self.module_name!r})>"
