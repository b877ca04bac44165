"""
Eval graders -- deterministic checks over pipeline outputs.

- CodeGrader: Named check functions, all-or-nothing pass
- validation_grader / safety_grader: Prebuilt graders for the common result shapes
"""

from .code_grader import CodeGrader, CodeGraderResult, safety_grader, validation_grader
