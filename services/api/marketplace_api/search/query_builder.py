"""
Search Query Builder

Builds the filtered SELECT used by equipment and manpower search from
independently optional clauses:

    base clauses       constant predicates (e.g. is_active = TRUE)
    keyword clause     (LOWER(f1) LIKE :p0 ESCAPE '\\' OR LOWER(f2) LIKE :p1 ...)
    location clause    (LOWER(location) LIKE :p2 ESCAPE '\\' OR ...), one per alias
    equality clauses   column = :pN

Every caller-supplied value is bound. Placeholders are numbered in the
order they are emitted, so `:pN` always refers to `params[N]` and the
placeholders appear in the SQL text in parameter order.

Column and table names come from code, never from request input.
"""

from dataclasses import dataclass, field
from typing import Any, Optional, Sequence

from sqlalchemy import text
from sqlalchemy.sql.elements import TextClause

from config.constants import QueryLimits

from ..utils.sql_safety import LIKE_ESCAPE, like_contains

_ESCAPE_CLAUSE = f"ESCAPE '{LIKE_ESCAPE}'"


@dataclass(frozen=True)
class SearchQuery:
    """A compiled search statement and its positional parameters."""

    sql: str
    params: tuple[Any, ...] = ()
    has_location_filter: bool = False

    @property
    def bind_params(self) -> dict[str, Any]:
        return {f"p{i}": value for i, value in enumerate(self.params)}

    def statement(self) -> TextClause:
        """SQLAlchemy text() construct with parameters bound."""
        stmt = text(self.sql)
        if self.params:
            stmt = stmt.bindparams(**self.bind_params)
        return stmt


@dataclass
class SearchQueryBuilder:
    """
    Accumulates search clauses for one table.

    Usage:
        query = (
            SearchQueryBuilder("equipment", columns)
            .where("is_active = TRUE")
            .keyword("crane", ["equipment_name", "description"])
            .location(*matcher.expand("chennai"))
            .equals("availability", "available")
            .build()
        )
    """

    table: str
    columns: Sequence[str] = ("*",)
    order_by: str = "created_at DESC"
    _clauses: list[str] = field(default_factory=list, init=False)
    _params: list[Any] = field(default_factory=list, init=False)
    _limit: Optional[int] = field(default=None, init=False)
    _has_location: bool = field(default=False, init=False)

    def _bind(self, value: Any) -> str:
        self._params.append(value)
        return f":p{len(self._params) - 1}"

    def where(self, clause: str) -> "SearchQueryBuilder":
        """Add a constant predicate. Must not contain request input."""
        self._clauses.append(clause)
        return self

    def keyword(self, keyword: Optional[str], fields: Sequence[str]) -> "SearchQueryBuilder":
        """Case-insensitive contains match of keyword against any of fields."""
        term = (keyword or "").strip()
        if not term or not fields:
            return self

        pattern = like_contains(term)
        parts = [f"LOWER({name}) LIKE {self._bind(pattern)} {_ESCAPE_CLAUSE}" for name in fields]
        self._clauses.append(f"({' OR '.join(parts)})")
        return self

    def location(
        self,
        matched: bool,
        aliases: Sequence[str],
        column: str = "location",
    ) -> "SearchQueryBuilder":
        """
        OR-match the column against every alias of a location expansion.

        An unmatched expansion adds nothing: no clause at all means no
        location filter.
        """
        if not matched or not aliases:
            return self

        parts = [
            f"LOWER({column}) LIKE {self._bind(like_contains(alias))} {_ESCAPE_CLAUSE}"
            for alias in aliases
        ]
        self._clauses.append(f"({' OR '.join(parts)})")
        self._has_location = True
        return self

    def equals(self, column: str, value: Any) -> "SearchQueryBuilder":
        """Equality filter; None skips the clause."""
        if value is None:
            return self
        self._clauses.append(f"{column} = {self._bind(value)}")
        return self

    def limit(self, limit: Optional[int]) -> "SearchQueryBuilder":
        """Cap the number of rows, never above QueryLimits.MAX."""
        self._limit = None if limit is None else max(0, min(limit, QueryLimits.MAX))
        return self

    def build(self) -> SearchQuery:
        sql = f"SELECT {', '.join(self.columns)} FROM {self.table}"
        if self._clauses:
            sql += " WHERE " + " AND ".join(self._clauses)
        if self.order_by:
            sql += f" ORDER BY {self.order_by}"

        params = list(self._params)
        if self._limit is not None:
            sql += f" LIMIT :p{len(params)}"
            params.append(self._limit)

        return SearchQuery(sql=sql, params=tuple(params), has_location_filter=self._has_location)
