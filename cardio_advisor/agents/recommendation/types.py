"""
Recommendation Agent Type Definitions

Result of one Gemini invocation plus parsing. The generator switches on
`status` to choose between per-field reconciliation and the reviewed
fallback set.
"""

from typing import Any, Dict, Literal, Optional, TypedDict, Union


class GenerationSucceeded(TypedDict):
    """Gemini answered with a JSON object."""
    status: Literal["OK"]
    data: Dict[str, Any]  # parsed object, fields not yet reconciled
    reason: None
    error: None


class GenerationFailed(TypedDict):
    """Invocation or parsing failed; nothing from the response is usable."""
    status: Literal["FAILED"]
    data: None
    reason: str  # short sanitized explanation for the error log
    error: Optional[Exception]


GenerationOutcome = Union[GenerationSucceeded, GenerationFailed]
