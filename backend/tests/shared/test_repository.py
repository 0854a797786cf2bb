"""Tests for shared/repository.py."""

import pytest
from unittest.mock import MagicMock

from shared.repository import BaseRepository, is_valid_id


class TestBaseRepository:
    """Tests for BaseRepository base class."""

    def test_init_stores_db_client(self):
        """Should store the database client in _db attribute."""
        mock_db = MagicMock()
        repo = BaseRepository(mock_db)
        assert repo._db is mock_db

    def test_subclass_can_access_db(self):
        """Subclass should be able to access _db and use it."""
        mock_db = MagicMock()
        mock_db.table.return_value.select.return_value.execute.return_value.data = [
            {"id": "123", "name": "test"}
        ]

        class TestRepository(BaseRepository[dict]):
            def get_all(self) -> list[dict]:
                return self._db.table("things").select("*").execute().data

        repo = TestRepository(mock_db)

        assert repo.get_all() == [{"id": "123", "name": "test"}]
        mock_db.table.assert_called_with("things")


class TestIsValidId:
    def test_uuid(self):
        assert is_valid_id("3f1c2a4e-8b7d-4c6e-9a1b-2d3e4f5a6b7c")

    @pytest.mark.parametrize(
        "value",
        [
            "",
            "123",
            "not-an-id",
            "3f1c2a4e-8b7d",
            "urn:uuid:3f1c2a4e-8b7d-4c6e-9a1b-2d3e4f5a6b7c",
            "{3f1c2a4e-8b7d-4c6e-9a1b-2d3e4f5a6b7c}",
            "3f1c2a4e8b7d4c6e9a1b2d3e4f5a6b7c",
        ],
    )
    def test_malformed(self, value):
        assert not is_valid_id(value)

    def test_uppercase_uuid(self):
        assert is_valid_id("3F1C2A4E-8B7D-4C6E-9A1B-2D3E4F5A6B7C")
