# Note model - the only persisted entity
from sqlalchemy import CheckConstraint, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from .base import BaseModel

TITLE_MAX_LENGTH = 255


class Note(BaseModel):
    """Note with a title and free-form content."""

    __tablename__ = "notes"

    title: Mapped[str] = mapped_column(String(TITLE_MAX_LENGTH), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)

    __table_args__ = (
        # list endpoint orders by creation time
        Index("idx_notes_created_at", "created_at"),
        CheckConstraint(f"length(title) <= {TITLE_MAX_LENGTH}", name="ck_notes_title_len"),
        CheckConstraint("updated_at >= created_at", name="ck_notes_updated_after_created"),
    )

    def __repr__(self) -> str:
        # Keep reprs short for long titles
        truncated = self.title if len(self.title) <= 30 else (self.title[:30] + "...")
        return f"<Note(id={self.id}, title='{truncated}')>"
