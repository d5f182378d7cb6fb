from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, ForeignKey, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from hrms.database.base import Base
from .mixins import AuditMixin

if TYPE_CHECKING:
    from .employee import Employee


class Appraisal(AuditMixin, Base):
    """
    Performance appraisal entry for an employee over a review period.
    """
    __tablename__ = "hrms_d_appraisal"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    employee_id: Mapped[int | None] = mapped_column(
        Integer,
        ForeignKey("hrms_d_employee.id"),
        nullable=True,
        index=True,
    )

    review_period_start: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)

    review_period_end: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)

    appraisal_cycle: Mapped[str] = mapped_column(String(100), default="", nullable=False)

    # 0.00 - 5.00 scale
    rating: Mapped[Decimal | None] = mapped_column(Numeric(4, 2), nullable=True)

    reviewer_comments: Mapped[str] = mapped_column(Text, default="", nullable=False)

    status: Mapped[str] = mapped_column(String(30), default="Pending", nullable=False)

    appraisal_employee: Mapped["Employee"] = relationship(
        "Employee",
        back_populates="appraisals",
        lazy="raise",
    )

    def __repr__(self) -> str:
        return f"<Appraisal(id={self.id!r}, employee_id={self.employee_id!r}, appraisal_cycle={self.appraisal_cycle!r})>"
