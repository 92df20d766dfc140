"""
HELOC component - credit line sizing and payoff simulation.
"""

from .component import credit_line_factor, run
from .models import HelocInput, HelocOutput, HelocResult

__all__ = ["run", "credit_line_factor", "HelocInput", "HelocOutput", "HelocResult"]
