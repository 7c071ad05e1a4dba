"""Where clause builder.

A `Where` composes per-alias field constraints into a boolean expression and
binds every compared value in a `BindParam`:

    ```python
    where = Where({"a": {"id": 1}, "b": {"id": 2, "age": Condition(Operator.GT, 18)}})
    where.statement        # "`a`.id = {id} AND `b`.id = {id__1} AND `b`.age > {age}"
    where.bind_param.get() # {"id": 1, "id__1": 2, "age": 18}
    ```
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from .bind_param import BindParam
from .config import resolve_param_style
from .errors import QueryRunnerError
from .utils import ParamStyle, format_param, get_label, get_property


class Operator(str, Enum):
    """Comparison operators supported in where clauses."""

    EQ = "="
    NE = "<>"
    GT = ">"
    GTE = ">="
    LT = "<"
    LTE = "<="
    IN = "IN"
    CONTAINS = "CONTAINS"
    STARTS_WITH = "STARTS WITH"
    ENDS_WITH = "ENDS WITH"
    IS_NULL = "IS NULL"
    IS_NOT_NULL = "IS NOT NULL"

    @property
    def binds_value(self) -> bool:
        """Whether the operator compares against a bound value."""
        return self not in (Operator.IS_NULL, Operator.IS_NOT_NULL)


class Joiner(str, Enum):
    """Boolean operator joining clauses."""

    AND = "AND"
    OR = "OR"


@dataclass(frozen=True)
class Condition:
    """A field constraint other than plain equality.

    Attributes:
        operator: The comparison operator.
        value: The compared value. Ignored by the null checks.
    """

    operator: Operator
    value: Any = None


class WhereStatement:
    """A ready-to-inline boolean expression and the parameters it references.

    Attributes:
        statement: The expression text. Empty when there is nothing to filter.
        bind_param: Registry holding every parameter the expression references.
    """

    def __init__(self, statement: str = "", bind_param: BindParam | Mapping[str, Any] | None = None) -> None:
        self.statement = statement
        self.bind_param = BindParam.acquire(bind_param)

    def __bool__(self) -> bool:
        return bool(self.statement)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WhereStatement):
            return NotImplemented
        return self.statement == other.statement and self.bind_param == other.bind_param

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(statement={self.statement!r}, bind_param={self.bind_param!r})"


class Where(WhereStatement):
    """Builds a where statement from per-alias field constraints.

    The supplied bind_param, when given, is extended in place so several
    clauses of one statement can share a registry.
    """

    def __init__(
        self,
        params: Mapping[str, Mapping[str, Any]] | None = None,
        bind_param: BindParam | Mapping[str, Any] | None = None,
        joiner: Joiner | str = Joiner.AND,
        param_style: ParamStyle | str | None = None,
    ) -> None:
        """Initialize and build the where statement.

        Args:
            params: Mapping of alias to a mapping of field to value. Plain
                values are compared for equality; `Condition` selects
                another operator.
            bind_param: Registry to bind values into. A plain mapping is
                wrapped; None allocates a fresh registry.
            joiner: Boolean operator joining the clauses.
            param_style: Placeholder syntax. Defaults to the configured style.
        """
        super().__init__("", bind_param)
        self.joiner = Joiner(joiner)
        self.param_style = resolve_param_style(param_style)
        self.params: dict[str, dict[str, Any]] = {}

        for alias, fields in (params or {}).items():
            self.add_params(alias, fields)

    def add_params(self, alias: str, fields: Mapping[str, Any]) -> "Where":
        """Add constraints for an alias and rebuild the statement.

        Args:
            alias: The identifier of the matched entity.
            fields: Mapping of field to value or `Condition`.

        Returns:
            This where, for chaining.
        """
        clauses = [self.statement] if self.statement else []
        for field, value in fields.items():
            clauses.append(self._build_clause(alias, field, value))
            self.params.setdefault(alias, {})[field] = value

        self.statement = f" {self.joiner.value} ".join(clauses)
        return self

    def _build_clause(self, alias: str, field: str, value: Any) -> str:
        condition = value if isinstance(value, Condition) else Condition(Operator.EQ, value)
        operator = Operator(condition.operator)
        target = f"{get_label(alias)}.{get_property(field)}"

        if not operator.binds_value:
            return f"{target} {operator.value}"

        name = self.bind_param.get_unique_name_and_add(field, condition.value)
        return f"{target} {operator.value} {format_param(name, self.param_style)}"

    def to_statement(self) -> WhereStatement:
        """Return the plain statement/bind param pair."""
        return WhereStatement(self.statement, self.bind_param)

    @staticmethod
    def combine(statements: Iterable[WhereStatement], joiner: Joiner | str = Joiner.AND) -> WhereStatement:
        """Compose several where statements into one.

        Non-empty expressions are parenthesized and joined. Parameters are
        merged into a fresh registry; the inputs must already use distinct
        names for distinct values, e.g. by sharing one BindParam.

        Args:
            statements: The statements to compose.
            joiner: Boolean operator joining them.

        Returns:
            The combined statement.

        Raises:
            QueryRunnerError: If two inputs bind different values to one name.
        """
        joiner = Joiner(joiner)
        bind_param = BindParam()
        parts = []
        for where in statements:
            for name, value in where.bind_param.get().items():
                if name in bind_param and bind_param.get()[name] != value:
                    raise QueryRunnerError(
                        f"Conflicting values for parameter '{name}'",
                        data={"name": name},
                    )
                bind_param.get()[name] = value
            if where.statement:
                parts.append(f"({where.statement})")

        return WhereStatement(f" {joiner.value} ".join(parts), bind_param)

