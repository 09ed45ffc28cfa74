"""Core database package: declarative base, statement filters, and repository.

Base:
    - Base: Declarative base with a shared, convention-named MetaData

Repository:
    - BaseRepository[T]: Session-factory bound building blocks for feature repositories

Query Filters:
    - WhereClause: Conjunction of prebuilt conditions
    - OrderBy: Column sorting (asc/desc)
    - LimitOffset: Pagination helper

Exceptions:
    - RepositoryError, QueryError, PersistenceError
    - InvalidFilterError, UnknownFieldError, UnsupportedOperationError
"""

from report_ledger.core.database.base import NAMING_CONVENTION, Base
from report_ledger.core.database.exceptions import (
    InvalidFilterError,
    PersistenceError,
    QueryError,
    RepositoryError,
    UnknownFieldError,
    UnsupportedOperationError,
)
from report_ledger.core.database.filters import (
    LimitOffset,
    OrderBy,
    StatementFilter,
    WhereClause,
)
from report_ledger.core.database.repository import BaseRepository

__all__ = [
    "NAMING_CONVENTION",
    "Base",
    "BaseRepository",
    "InvalidFilterError",
    "LimitOffset",
    "OrderBy",
    "PersistenceError",
    "QueryError",
    "RepositoryError",
    "StatementFilter",
    "UnknownFieldError",
    "UnsupportedOperationError",
    "WhereClause",
]
