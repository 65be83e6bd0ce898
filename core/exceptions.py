# core/exceptions.py
from typing import List, Optional


class FormulaOrderError(Exception):
    """Base exception for formula ordering errors."""
    pass


class FormulaSyntaxError(FormulaOrderError):
    """
    Raised on a lexical, grammar or name-resolution failure.

    Carries the cursor position where the failure was detected.
    """
    def __init__(self, position, message: str):
        super().__init__(f"Error at {position}.\n{message}")
        self.position = position
        self.message = message


class SemanticError(FormulaOrderError):
    """Raised when the formulas depend on each other in a cycle."""
    def __init__(self, message: str, cycle: Optional[List[str]] = None):
        super().__init__(message)
        self.message = message
        self.cycle = cycle or []


class ConfigError(FormulaOrderError):
    """Raised when a configuration file cannot be loaded or validated."""
    pass
