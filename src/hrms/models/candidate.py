from typing import TYPE_CHECKING

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from hrms.database.base import Base
from .mixins import AuditMixin

if TYPE_CHECKING:
    from .employment_contract import EmploymentContract


class Candidate(AuditMixin, Base):
    """
    Recruitment candidate. Owned by the recruitment module; read here for
    contract foreign-key checks and to show the candidate's name.
    """
    __tablename__ = "hrms_d_candidate_master"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    full_name: Mapped[str] = mapped_column(String(150), nullable=False, index=True)

    email: Mapped[str | None] = mapped_column(String(100), nullable=True)

    phone: Mapped[str | None] = mapped_column(String(30), nullable=True)

    contracts: Mapped[list["EmploymentContract"]] = relationship(
        "EmploymentContract",
        back_populates="contracted_candidate",
        lazy="raise",
    )

    def __repr__(self) -> str:
        return f"<Candidate(id={self.id!r}, full_name={self.full_name!r})>"
