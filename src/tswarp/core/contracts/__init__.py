"""
Contract Validation Module

Модуль для валидации JSON контрактов tswarp.
"""

from .validators import (
    ContractValidator,
    RunReportValidator,
    SchemaLoader,
    validate_run_report,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "RunReportValidator",
    # Functions
    "validate_run_report",
]
