"""Reference posts and the verdicts produced when matching OCR text against them."""

from dataclasses import dataclass
from typing import FrozenSet, List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


def _default_list() -> List[str]:
    return []


class TruthPost(BaseModel):
    """A single reference post from the corpus dump."""

    model_config = ConfigDict(frozen=True, extra="ignore", coerce_numbers_to_str=True)

    id: str
    created_at: str = ""
    content: str
    url: str = ""
    media: List[str] = Field(default_factory=_default_list)
    replies_count: int = 0
    reblogs_count: int = 0
    favourites_count: int = 0


@dataclass(frozen=True)
class IndexedPost:
    """Derived matching data, position-aligned with the corpus."""
    index: int
    normalized_content: str
    words: FrozenSet[str]


@dataclass(frozen=True)
class Candidate:
    """Shortlist entry: a corpus position and how many query words it shares."""
    index: int
    shared_words: int


class VerificationResult(BaseModel):
    """Verdict for one piece of OCR text."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    verified: bool
    post: Optional[TruthPost] = None
    similarity: float = Field(0.0, ge=0.0, le=1.0)
    ocr_text: str = Field("", alias="ocrText")

    @model_validator(mode="after")
    def _verified_requires_post(self) -> "VerificationResult":
        if self.verified and self.post is None:
            raise ValueError("a verified result must carry the matched post")
        return self

    @classmethod
    def empty(cls, ocr_text: str) -> "VerificationResult":
        return cls(verified=False, post=None, similarity=0.0, ocr_text=ocr_text)
