"""Chapter data models produced by the import segmenter."""

from datetime import datetime

from pydantic import BaseModel


class ChapterSummary(BaseModel):
    """A detected chapter heading and its position in the source text.

    ``word_count`` is the character length of the body lines that follow
    the heading, not a language-aware word count.
    """

    index: int  # 0-based, in discovery order
    title: str
    start_line: int  # Line index of the heading itself
    word_count: int = 0


class ChapterRecord(BaseModel):
    """A chapter ready to be handed to the novel management views.

    ``id`` is the build timestamp (epoch milliseconds) plus the record's
    position, so it is only unique within a single import build.
    """

    id: int
    title: str
    description: str = ""
    content: str
    word_count: int  # len(content)
    status: str = "draft"  # "draft", "published"
    created_at: datetime
    updated_at: datetime
