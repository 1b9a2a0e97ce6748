"""Translation of database driver errors into domain errors."""

from sqlalchemy.exc import DBAPIError, IntegrityError

from featurevote.domain.error import ConflictError, TransactionAbortedError

# PostgreSQL SQLSTATE codes after which the transaction was rolled back
# and can be run again from scratch
ABORTED_SQLSTATES = {
    "40001": "serialization failure",
    "40P01": "deadlock detected",
    "55P03": "lock not available",
    "57014": "statement timeout",
}


def sqlstate_of(error: DBAPIError) -> str | None:
    """Extract the SQLSTATE code from a wrapped driver error.

    Args:
        error: SQLAlchemy-wrapped DBAPI error

    Returns:
        SQLSTATE code, or None if the driver didn't report one
    """
    orig = error.orig
    return getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)


def translate_db_error(error: DBAPIError) -> Exception:
    """Map a DBAPI error onto the domain error it represents.

    Args:
        error: SQLAlchemy-wrapped DBAPI error

    Returns:
        ConflictError for integrity violations, TransactionAbortedError
        for aborts that are safe to retry, otherwise the error itself
    """
    if isinstance(error, IntegrityError):
        return ConflictError(f"Integrity violation: {error.orig}")

    sqlstate = sqlstate_of(error)
    if sqlstate in ABORTED_SQLSTATES:
        return TransactionAbortedError(
            f"Transaction aborted ({ABORTED_SQLSTATES[sqlstate]}, SQLSTATE {sqlstate})"
        )

    return error
