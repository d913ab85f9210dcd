"""Tests for shared/repository.py."""

import pytest
from unittest.mock import MagicMock

from postgrest.exceptions import APIError

from shared.exceptions import DatabaseError
from shared.repository import BaseRepository


class TestBaseRepository:
    """Tests for BaseRepository base class."""

    def test_init_stores_db_client(self):
        """Should store the database client in _db attribute."""
        mock_db = MagicMock()
        repo = BaseRepository(mock_db)
        assert repo._db is mock_db

    def test_execute_returns_response(self):
        """_execute should return whatever the query returns."""
        mock_db = MagicMock()
        query = mock_db.table.return_value.select.return_value
        query.execute.return_value.data = [{"id": "123"}]

        repo = BaseRepository(mock_db)
        result = repo._execute("get_all", mock_db.table("test").select("*"))

        assert result.data == [{"id": "123"}]

    def test_execute_wraps_api_errors(self):
        """PostgREST failures should surface as DatabaseError."""
        query = MagicMock()
        query.execute.side_effect = APIError({"code": "08006", "message": "connection failure"})

        repo = BaseRepository(MagicMock())
        with pytest.raises(DatabaseError) as exc_info:
            repo._execute("list_things", query)

        assert exc_info.value.details["operation"] == "list_things"
        assert exc_info.value.details["original_error"] == "08006"
        assert exc_info.value.status_code == 500

    def test_execute_does_not_swallow_other_errors(self):
        """Only PostgREST errors are translated."""
        query = MagicMock()
        query.execute.side_effect = KeyError("boom")

        repo = BaseRepository(MagicMock())
        with pytest.raises(KeyError):
            repo._execute("op", query)

    def test_is_unique_violation(self):
        """Should recognise Postgres unique_violation."""
        assert BaseRepository._is_unique_violation(APIError({"code": "23505", "message": "dup"}))
        assert not BaseRepository._is_unique_violation(APIError({"code": "23503", "message": "fk"}))
