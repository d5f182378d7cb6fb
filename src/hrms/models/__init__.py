r"""
Single import point for the HRMS ORM models.

Importing this package also registers every table on `Base.metadata`, which is
what `create_all` in the tests relies on:

    from hrms.models import Branch, EmploymentContract
"""

from .branch import Branch
from .module import Module
from .candidate import Candidate
from .employee import Employee
from .employment_contract import EmploymentContract
from .appraisal import Appraisal
from .statutory_rate import StatutoryRate

__all__ = [
    "Branch",
    "Module",
    "Candidate",
    "Employee",
    "EmploymentContract",
    "Appraisal",
    "StatutoryRate",
]
