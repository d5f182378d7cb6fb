from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from hrms.database.base import Base
from .mixins import AuditMixin

if TYPE_CHECKING:
    from .candidate import Candidate


class EmploymentContract(AuditMixin, Base):
    """
    Employment contract issued to a candidate.

    `contracted_candidate` is always loaded eagerly by the repository so the
    candidate's name travels with every contract returned by the API.
    """
    __tablename__ = "hrms_d_employment_contract"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    candidate_id: Mapped[int | None] = mapped_column(
        Integer,
        ForeignKey("hrms_d_candidate_master.id"),
        nullable=True,
        index=True,
    )

    contract_start_date: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)

    contract_end_date: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)

    contract_type: Mapped[str] = mapped_column(String(100), default="", nullable=False)

    document_path: Mapped[str] = mapped_column(String(255), default="", nullable=False)

    description: Mapped[str] = mapped_column(Text, default="", nullable=False)

    contracted_candidate: Mapped["Candidate"] = relationship(
        "Candidate",
        back_populates="contracts",
        lazy="raise",  # must be loaded explicitly (async sessions cannot lazy-load)
    )

    def __repr__(self) -> str:
        return f"<EmploymentContract(id={self.id!r}, candidate_id={self.candidate_id!r}, contract_type={self.contract_type!r})>"
