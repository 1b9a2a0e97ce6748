"""Unit tests for database error translation."""

from sqlalchemy.exc import DBAPIError, IntegrityError, OperationalError

from featurevote.domain.error import ConflictError, TransactionAbortedError
from featurevote.persistence.error import sqlstate_of, translate_db_error


class FakeDriverError(Exception):
    """Driver exception carrying a SQLSTATE like asyncpg's."""

    def __init__(self, sqlstate: str | None) -> None:
        super().__init__(f"driver error {sqlstate}")
        self.sqlstate = sqlstate


def wrap(sqlstate: str | None, cls=OperationalError) -> DBAPIError:
    return cls(
        "UPDATE features SET vote_count = vote_count + 1", {}, FakeDriverError(sqlstate)
    )


class TestTranslateDbError:
    """Tests for translate_db_error."""

    def test_deadlock_is_retryable_abort(self):
        translated = translate_db_error(wrap("40P01"))

        assert isinstance(translated, TransactionAbortedError)
        assert "deadlock" in str(translated)

    def test_serialization_failure_is_retryable_abort(self):
        assert isinstance(translate_db_error(wrap("40001")), TransactionAbortedError)

    def test_lock_and_statement_timeouts_are_aborts(self):
        assert isinstance(translate_db_error(wrap("55P03")), TransactionAbortedError)
        assert isinstance(translate_db_error(wrap("57014")), TransactionAbortedError)

    def test_integrity_error_is_conflict(self):
        translated = translate_db_error(wrap("23505", cls=IntegrityError))

        assert isinstance(translated, ConflictError)

    def test_other_errors_pass_through(self):
        """Errors that aren't aborts or conflicts come back unchanged."""
        error = wrap("08006")

        assert translate_db_error(error) is error

    def test_sqlstate_of_missing_code(self):
        assert sqlstate_of(wrap(None)) is None
