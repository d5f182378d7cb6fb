# hrms/
# │
# ├── exceptions/
# │   ├── __init__.py
# │   ├── base.py                    # App-level errors (RepositoryError, NotFoundError, DataError, ...)
# │   ├── integrity_classifier.py    # Classify DB integrity errors by constraint kind
# │   └── mapper.py                  # db_error_handler: SQLAlchemy errors -> app-level errors

from .base import (
    RepositoryError,
    NotFoundError,
    DataError,
    ServiceUnavailableError,
    InvalidFieldError,
)

__all__ = [
    "RepositoryError",
    "NotFoundError",
    "DataError",
    "ServiceUnavailableError",
    "InvalidFieldError",
]
