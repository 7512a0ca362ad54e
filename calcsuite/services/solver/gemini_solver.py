"""
AI Math Solver

DESIGN DECISION: The generative model is a helper, not a calculator
of record. Its answer is shown as text and never feeds back into the
ledger or any other tool.

BOUNDARIES:
- One request per user action, no retries
- Any failure becomes a fixed, user-readable message
- Math delimiters ($$, \\[, \\]) are stripped before display
"""

import re
from typing import Optional, Union

import google.generativeai as genai

from calcsuite.audit import get_logger
from calcsuite.config import GeminiSettings, get_settings
from calcsuite.models.solver import SolverRequest, SolverResponse


logger = get_logger(__name__)

CONNECTION_ERROR_MESSAGE = "Connection error. Please check your API key."
NO_SOLUTION_MESSAGE = "Sorry, I couldn't generate a solution."

_MATH_DELIMITERS = re.compile(r"\$\$|\\\[|\\\]")


class SolverError(Exception):
    """Base exception for solver failures."""
    pass


def strip_math_delimiters(text: str) -> str:
    return _MATH_DELIMITERS.sub("", text)


class GeminiMathSolver:
    """
    Step-by-step problem solver backed by a Gemini model.

    RESPONSIBILITIES:
    - Build the tutoring prompt (optionally with a target unit)
    - Attach a single image when one is provided
    - Turn the model's answer, or its failure, into display text
    """

    def __init__(
        self,
        model=None,
        settings: Optional[GeminiSettings] = None,
    ):
        """
        Args:
            model: Object exposing `generate_content_async`. Built from
                   settings when omitted.
            settings: Gemini configuration (API key, model, sampling).
        """
        if model is None:
            model = self._create_model(settings or get_settings().gemini)
        self._model = model

    @staticmethod
    def _create_model(settings: GeminiSettings):
        """Configure Google Generative AI."""
        genai.configure(api_key=settings.api_key)
        return genai.GenerativeModel(
            model_name=settings.model_name,
            generation_config={
                "temperature": settings.temperature,
                "max_output_tokens": settings.max_tokens,
            }
        )

    @staticmethod
    def build_instructions(unit_hint: Optional[str] = None) -> str:
        unit_rule = (
            f"Convert final answer to {unit_hint}."
            if unit_hint
            else "Use appropriate units."
        )
        return (
            "You are an expert Math Tutor AI. CRITICAL: "
            "1. Provide detailed step-by-step solution. "
            "2. Show reasoning. "
            f"3. {unit_rule} "
            "4. No LaTeX/markdown math (no $$). Use plain text. "
            "5. No currency symbols in steps."
        )

    def build_contents(self, request: SolverRequest) -> Union[str, list]:
        instructions = self.build_instructions(request.unit_hint)

        if request.image is None:
            return f'{instructions}\nSolve: "{request.problem}".'

        if request.problem:
            text = f'{instructions}\nAnalyze this image and solve: "{request.problem}".'
        else:
            text = f"{instructions}\nAnalyze and solve step-by-step."
        return [
            {"mime_type": request.image.mime_type, "data": request.image.data},
            text,
        ]

    async def _generate(self, contents) -> str:
        try:
            response = await self._model.generate_content_async(contents)
        except Exception as e:
            raise SolverError(str(e)) from e

        try:
            return response.text or ""
        except ValueError:
            # Blocked or empty candidates: there is simply no text
            return ""

    async def solve(self, request: SolverRequest) -> Optional[SolverResponse]:
        """
        Solve a problem.

        Returns None when there is nothing to send (no text, no image).
        """
        if request.is_empty:
            return None

        try:
            text = await self._generate(self.build_contents(request))
        except SolverError as e:
            logger.error(
                "solver_failed",
                error=str(e),
                has_image=request.image is not None,
            )
            return SolverResponse(text=CONNECTION_ERROR_MESSAGE, solved=False)

        text = strip_math_delimiters(text).strip()
        if not text:
            return SolverResponse(text=NO_SOLUTION_MESSAGE, solved=False)

        logger.info("solver_answered", has_image=request.image is not None, length=len(text))
        return SolverResponse(text=text, solved=True)
