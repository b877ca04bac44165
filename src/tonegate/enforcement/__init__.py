"""
Enforcement -- validation of text against brand voice, safety, and readability.

Components:
  - ValidationPipeline: Orchestrates rule, safety, and readability checks into a trust score
  - readability: Flesch reading ease, Flesch-Kincaid grade, Gunning fog
  - ValidationConfig / ValidationResult: Stage switches and the aggregated outcome
"""

from .models import ValidationConfig, ValidationResult
from .pipeline import ValidationPipeline, calculate_score
from .readability import ReadabilityAnalysis, analyze

__all__ = [
    "ReadabilityAnalysis",
    "ValidationConfig",
    "ValidationPipeline",
    "ValidationResult",
    "analyze",
    "calculate_score",
]
