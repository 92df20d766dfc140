"""
Social Security component - retirement benefit estimate from bend points.
"""

from .component import benefit_adjustment, primary_insurance_amount, run
from .models import (
    CumulativeBenefit,
    MaritalStatus,
    RetirementAge,
    SocialSecurityInput,
    SocialSecurityOutput,
    SocialSecurityResult,
)
from .ports import SocialSecurityTablesPort

__all__ = [
    "run",
    "benefit_adjustment",
    "primary_insurance_amount",
    "CumulativeBenefit",
    "MaritalStatus",
    "RetirementAge",
    "SocialSecurityInput",
    "SocialSecurityOutput",
    "SocialSecurityResult",
    "SocialSecurityTablesPort",
]
