"""
Unit tests for Favorite schemas.
"""

import uuid

import pytest
from pydantic import ValidationError

from src.booknotes.core.schemas.favorites import FavoriteCreate


class TestFavoriteCreate:
    def test_accepts_camel_case_keys(self):
        fav = FavoriteCreate.model_validate({
            "bookId": "zyTCAlFPjgYC",
            "title": "The Google Story",
            "authors": ["David A. Vise", "Mark Malseed"],
            "thumbnail": "http://example.com/cover.jpg",
        })

        assert fav.book_id == "zyTCAlFPjgYC"
        assert fav.title == "The Google Story"
        assert fav.authors == ["David A. Vise", "Mark Malseed"]
        assert fav.thumbnail == "http://example.com/cover.jpg"

    def test_accepts_snake_case_names(self):
        fav = FavoriteCreate(book_id="abc")
        assert fav.book_id == "abc"

    def test_optional_fields_default(self):
        fav = FavoriteCreate.model_validate({"bookId": "abc"})

        assert fav.title == ""
        assert fav.authors == []
        assert fav.thumbnail is None

    def test_book_id_required(self):
        with pytest.raises(ValidationError):
            FavoriteCreate.model_validate({"title": "No id"})

    def test_blank_book_id_rejected(self):
        with pytest.raises(ValueError, match="bookId cannot be empty"):
            FavoriteCreate.model_validate({"bookId": "   "})

    def test_authors_must_be_list_of_strings(self):
        with pytest.raises(ValidationError):
            FavoriteCreate.model_validate({"bookId": "abc", "authors": "Single Author"})

    def test_client_owner_id_is_ignored(self):
        fav = FavoriteCreate.model_validate({"bookId": "abc", "ownerId": str(uuid.uuid4())})
        assert "owner_id" not in fav.model_dump()
