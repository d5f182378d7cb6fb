from datetime import datetime
from decimal import Decimal

from sqlalchemy import DateTime, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from hrms.database.base import Base
from .mixins import AuditMixin


class StatutoryRate(AuditMixin, Base):
    """
    Statutory deduction / contribution rate (provident fund, social security,
    income-tax slab, ...) applicable to wages between `lower_limit` and
    `upper_limit` during its effective period.
    """
    __tablename__ = "hrms_m_statutory_rate"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    statutory_type: Mapped[str] = mapped_column(String(100), nullable=False, index=True)

    rate: Mapped[Decimal] = mapped_column(Numeric(8, 4), default=0, nullable=False)

    lower_limit: Mapped[Decimal] = mapped_column(Numeric(14, 2), default=0, nullable=False)

    upper_limit: Mapped[Decimal] = mapped_column(Numeric(14, 2), default=0, nullable=False)

    effective_from: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)

    effective_to: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)

    description: Mapped[str | None] = mapped_column(String(255), nullable=True)

    def __repr__(self) -> str:
        return f"<StatutoryRate(id={self.id!r}, statutory_type={self.statutory_type!r}, rate={self.rate!r})>"
