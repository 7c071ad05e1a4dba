"""Pydantic models describing relationship creation requests."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field

from .where import WhereStatement


class Direction(str, Enum):
    """Orientation of a relationship between endpoints `a` and `b`."""

    OUT = "out"  # (a)-[r]->(b)
    IN = "in"  # (a)<-[r]-(b)
    NONE = "none"  # (a)-[r]-(b)


class NodeLabel(BaseModel):
    """An endpoint of a relationship, identified by its label.

    Attributes:
        label: The node label (unescaped).
    """

    label: str = Field(..., description="Node label")


class RelationshipDescriptor(BaseModel):
    """The relationship to be created.

    Attributes:
        label: The relationship label (unescaped).
        direction: Orientation relative to endpoints `a` and `b`.
        values: Values to be set as relationship attributes.
    """

    label: str = Field(..., description="Relationship label")
    direction: Direction = Field(..., description="Relationship direction")
    values: dict[str, Any] | None = Field(None, description="Relationship attribute values")


class CreateRelationshipParams(BaseModel):
    """Parameters for creating a relationship between matched nodes.

    The where statement can reference the endpoints by the aliases `a`
    and `b`.

    Attributes:
        a: The first endpoint.
        b: The second endpoint.
        relationship: The relationship to create.
        where: Filter matching both endpoints.
    """

    a: NodeLabel
    b: NodeLabel
    relationship: RelationshipDescriptor
    where: WhereStatement

    class Config:
        """Pydantic model configuration."""

        arbitrary_types_allowed = True
        extra = "forbid"
