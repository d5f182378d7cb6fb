from datetime import datetime

from sqlalchemy import DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func


class AuditMixin:
    """
    Audit columns shared by every HRMS table.

    `createdby` / `updatedby` hold the acting user's id (1 = system when the
    caller does not say), `log_inst` the logging instance that wrote the row,
    `is_active` the "Y"/"N" status flag managed by each entity.
    """

    is_active: Mapped[str] = mapped_column(String(1), default="Y", server_default="Y", nullable=False)

    createdby: Mapped[int] = mapped_column(Integer, default=1, nullable=False)

    createdate: Mapped[datetime] = mapped_column(
        DateTime,
        default=datetime.now,
        server_default=func.now(),
        nullable=False,
        index=True,  # list date-range filters run on createdate
    )

    updatedby: Mapped[int | None] = mapped_column(Integer, nullable=True)

    updatedate: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)

    log_inst: Mapped[int] = mapped_column(Integer, default=1, nullable=False)
