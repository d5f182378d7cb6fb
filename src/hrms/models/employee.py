from typing import TYPE_CHECKING

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from hrms.database.base import Base
from .mixins import AuditMixin

if TYPE_CHECKING:
    from .appraisal import Appraisal


class Employee(AuditMixin, Base):
    """
    Employee master row. Owned by the core HR module; read here for appraisal
    foreign-key checks and display fields.
    """
    __tablename__ = "hrms_d_employee"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    employee_code: Mapped[str | None] = mapped_column(String(50), nullable=True, unique=True)

    full_name: Mapped[str] = mapped_column(String(150), nullable=False, index=True)

    email: Mapped[str | None] = mapped_column(String(100), nullable=True)

    appraisals: Mapped[list["Appraisal"]] = relationship(
        "Appraisal",
        back_populates="appraisal_employee",
        lazy="raise",
    )

    def __repr__(self) -> str:
        return f"<Employee(id={self.id!r}, employee_code={self.employee_code!r})>"
