"""Parameterized Cypher statement generation for bulk graph operations.

This package turns high-level requests (create nodes, edit nodes, delete
nodes, create relationships) into Cypher statements with uniquely-named bound
parameters, and runs them through a caller-managed session such as
``neo4j.AsyncSession``.

Example usage:
    ```python
    from neo4j import AsyncGraphDatabase
    from neoquery import Direction, QueryRunner, Where

    runner = QueryRunner(logger=print, param_style="dollar")

    async with AsyncGraphDatabase.driver(uri, auth=auth) as driver, driver.session() as session:
        await runner.create_many(session, "Person", [{"id": 1}, {"id": 2}])

        await runner.create_relationship(
            session,
            {
                "a": {"label": "Person"},
                "b": {"label": "Person"},
                "relationship": {
                    "label": "KNOWS",
                    "direction": Direction.OUT,
                    "values": {"since": 2020},
                },
                "where": Where({"a": {"id": 1}, "b": {"id": 2}}, param_style="dollar"),
            },
        )
    ```
"""

from .bind_param import BindParam
from .config import Settings, get_settings, resolve_param_style
from .errors import ConstraintError, ErrorKind, NotFoundError, QueryRunnerError
from .models import CreateRelationshipParams, Direction, NodeLabel, RelationshipDescriptor
from .runner import QueryRunner, Session, StatementLogger
from .utils import ParamStyle, format_param, get_label, get_property, sanitize_identifier
from .where import Condition, Joiner, Operator, Where, WhereStatement

__all__ = [
    # Parameters
    "BindParam",
    # Where
    "Condition",
    "Joiner",
    "Operator",
    "Where",
    "WhereStatement",
    # Runner
    "QueryRunner",
    "Session",
    "StatementLogger",
    # Models
    "CreateRelationshipParams",
    "Direction",
    "NodeLabel",
    "RelationshipDescriptor",
    # Errors
    "ErrorKind",
    "QueryRunnerError",
    "NotFoundError",
    "ConstraintError",
    # Config
    "Settings",
    "get_settings",
    "resolve_param_style",
    # Utils
    "ParamStyle",
    "format_param",
    "get_label",
    "get_property",
    "sanitize_identifier",
]
