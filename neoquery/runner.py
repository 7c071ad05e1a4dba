"""QueryRunner: builds and runs bulk node and relationship statements.

Every operation escapes its labels, fills a fixed statement template,
computes the parameters from the where statement's BindParam plus any payload,
logs the pair and hands it to ``session.run``. The session's result is
returned unchanged and its errors propagate unchanged.
"""

from collections.abc import Callable, Mapping, Sequence
from typing import Any, Protocol

import structlog

from .bind_param import BindParam
from .config import get_settings, resolve_param_style
from .models import CreateRelationshipParams, Direction
from .utils import ParamStyle, format_param, get_label, get_property
from .where import WhereStatement

logger = structlog.get_logger(__name__)

#: Variadic sink receiving ``(statement, parameters)`` before each run.
StatementLogger = Callable[..., Any]


class Session(Protocol):
    """The part of a database session the runner relies on.

    ``neo4j.AsyncSession`` satisfies it.
    """

    async def run(self, query: str, parameters: dict[str, Any] | None = None) -> Any: ...


class QueryRunner:
    """Builds parameterized statements and submits them through a session.

    Attributes:
        logger: Optional callable invoked with ``(statement, parameters)``.
        param_style: Placeholder syntax used in generated statements.
    """

    get_label = staticmethod(get_label)

    def __init__(
        self,
        logger: StatementLogger | None = None,
        param_style: ParamStyle | str | None = None,
    ) -> None:
        """Initialize the runner.

        Args:
            logger: Called with the statement and parameters of every run.
            param_style: Placeholder syntax. Defaults to the configured style.
        """
        self.logger = logger
        self.param_style = resolve_param_style(param_style)

    @staticmethod
    def get_relationship_pattern(direction: Direction | str, label: str, alias: str = "r") -> str:
        """Render the relationship segment between two node patterns.

        `out` renders -[r:`L`]->, `in` renders <-[r:`L`]- and `none`
        renders -[r:`L`]-.
        """
        direction = Direction(direction)
        left = "<-" if direction is Direction.IN else "-"
        right = "->" if direction is Direction.OUT else "-"
        return f"{left}[{alias}:{get_label(label)}]{right}"

    def _param(self, name: str) -> str:
        return format_param(name, self.param_style)

    def _log(self, *values: Any) -> None:
        if self.logger is not None:
            self.logger(*values)

    async def run(
        self,
        session: Session,
        statement: str,
        parameters: Mapping[str, Any] | None = None,
    ) -> Any:
        """Log a statement and run it through the session.

        Args:
            session: The session for running this query.
            statement: The statement text.
            parameters: The bound parameters.

        Returns:
            The session's result, unchanged.
        """
        parameters = dict(parameters or {})
        self._log(statement, parameters)
        if get_settings().log_statements:
            logger.debug("Running statement", statement=statement, parameters=parameters)
        return await session.run(statement, parameters)

    async def create_many(self, session: Session, nodes_label: str, options: Sequence[Mapping[str, Any]]) -> Any:
        """Create one node per item, with the item as its properties.

        Args:
            session: The session for running this query.
            nodes_label: The label of the nodes to create.
            options: The property sets of the nodes to create.

        Returns:
            The session's result.
        """
        label = get_label(nodes_label)

        statement = "\n".join(
            [
                f"UNWIND {self._param('options')} AS {label}",
                f"CREATE (node:{label})",
                f"SET node = {label}",
                "RETURN node",
            ]
        )
        parameters = {"options": list(options)}

        return await self.run(session, statement, parameters)

    async def create_one(self, session: Session, nodes_label: str, values: Mapping[str, Any]) -> Any:
        """Create a single node. See `create_many`."""
        return await self.create_many(session, nodes_label, [values])

    async def edit_many(
        self,
        session: Session,
        nodes_label: str,
        options: Mapping[str, Any],
        where: WhereStatement | None = None,
    ) -> Any:
        """Merge the given properties onto every matching node.

        The where statement references the nodes by their label, e.g.
        ``Where({"Person": {"id": 1}})``.

        Args:
            session: The session for running this query.
            nodes_label: The label of the nodes to edit.
            options: The new property values.
            where: Filter matching the nodes to be edited.

        Returns:
            The session's result.
        """
        label = get_label(nodes_label)

        bind_param = BindParam.acquire(where.bind_param if where else None).clone()
        options_name = bind_param.get_unique_name_and_add("options", dict(options))

        lines = [f"MATCH ({label}:{label})"]
        if where and where.statement:
            lines.append(f"WHERE {where.statement}")
        lines.append(f"SET {label} += {self._param(options_name)}")
        lines.append(f"RETURN {label}")

        return await self.run(session, "\n".join(lines), bind_param.get())

    async def delete_many(self, session: Session, nodes_label: str, where: WhereStatement | None = None) -> Any:
        """Delete matching nodes together with their relationships.

        Args:
            session: The session for running this query.
            nodes_label: The label of the nodes to delete.
            where: Filter matching the nodes to be deleted.

        Returns:
            The session's result.
        """
        label = get_label(nodes_label)

        lines = [f"MATCH ({label}:{label})"]
        if where and where.statement:
            lines.append(f"WHERE {where.statement}")
        lines.append(f"OPTIONAL MATCH ({label})-[r]-()")
        lines.append(f"DELETE {label}, r")

        parameters = where.bind_param.get() if where else {}

        return await self.run(session, "\n".join(lines), parameters)

    async def create_relationship(
        self,
        session: Session,
        params: CreateRelationshipParams | Mapping[str, Any],
    ) -> Any:
        """Create a relationship between the nodes matched by the where statement.

        The endpoints are aliased `a` and `b`, the relationship `r`.
        Relationship values are bound under names that never collide with the
        where statement's parameters.

        Args:
            session: The session for running this query.
            params: The endpoints, relationship and where statement.

        Returns:
            The session's result.
        """
        if not isinstance(params, CreateRelationshipParams):
            params = CreateRelationshipParams.model_validate(params)
        relationship = params.relationship

        bind_param = BindParam.acquire(params.where.bind_param).clone()
        assignments = []
        for key, value in (relationship.values or {}).items():
            name = bind_param.get_unique_name_and_add(key, value)
            assignments.append(f"r.{get_property(key)} = {self._param(name)}")

        pattern = self.get_relationship_pattern(relationship.direction, relationship.label)

        lines = [f"MATCH (a:{get_label(params.a.label)}), (b:{get_label(params.b.label)})"]
        if params.where.statement:
            lines.append(f"WHERE {params.where.statement}")
        lines.append(f"CREATE (a){pattern}(b)")
        if assignments:
            lines.append("SET " + ", ".join(assignments))

        return await self.run(session, "\n".join(lines), bind_param.get())
