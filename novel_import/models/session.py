"""Import session state model."""

from pydantic import BaseModel


class ImportState(BaseModel):
    """Mutable state of a single file import.

    Kept as a plain serializable model so the owning UI layer can store
    and restore it without knowing about the reader or segmenter.
    """

    book_content: str = ""
    uploaded_file: str | None = None  # Name of the file that was read
    selected_encoding: str = "utf-8"  # "utf-8", "gbk", "auto"
    chapter_mode: str = "regex"  # "regex", "single"
