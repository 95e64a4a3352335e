from typing import List, Optional

from pydantic import BaseModel, StrictBool, StrictStr


# --- Data Models ---
class CompareRequest(BaseModel):
    user_text: StrictStr
    reference_text: StrictStr
    format_user_text: StrictBool = True


class FeedbackElement(BaseModel):
    text: str
    type: str
    correction: Optional[str] = None
    is_missing: bool
    missing_type: str


class FeedbackSummary(BaseModel):
    correct: int
    incorrect: int
    missing: int
    extra: int
    total: int
    errors: int


class CompareResponse(BaseModel):
    elements: List[FeedbackElement]
    summary: FeedbackSummary
    display_text: str
