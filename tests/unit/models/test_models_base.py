"""
Unit tests for base model functionality.
"""

import uuid
from datetime import timezone

from quicknotes.core.models.base import BaseModel, utc_now
from quicknotes.core.models.note import Note


class TestBaseModel:
    """Test BaseModel functionality."""

    def test_base_model_abstract(self):
        assert BaseModel.__abstract__ is True

    def test_inherited_columns(self):
        columns = {column.name for column in Note.__table__.columns}
        assert {"id", "created_at", "updated_at", "title", "content"} <= columns

    def test_repr_method(self):
        model = Note(title="t", content="c")
        test_id = uuid.uuid4()
        model.id = test_id

        assert repr(model) == f"<Note(id={test_id}, title='t')>"

    def test_utc_now_is_aware(self):
        assert utc_now().tzinfo is timezone.utc
