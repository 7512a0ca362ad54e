"""AI solver services package."""

from calcsuite.services.solver.gemini_solver import (
    CONNECTION_ERROR_MESSAGE,
    NO_SOLUTION_MESSAGE,
    GeminiMathSolver,
    SolverError,
    strip_math_delimiters,
)

__all__ = [
    "CONNECTION_ERROR_MESSAGE",
    "NO_SOLUTION_MESSAGE",
    "GeminiMathSolver",
    "SolverError",
    "strip_math_delimiters",
]
