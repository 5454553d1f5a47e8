"""
Diagram schemas.

Extra editor fields (label, description, parentNode, style, ...) are kept so
a diagram survives a save/load round trip unchanged.
"""

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class Position(BaseModel):
    x: float
    y: float


class DiagramNode(BaseModel):
    """A placed architecture component."""
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: str
    type_label: str = Field(alias="type")
    position: Position


class DiagramEdge(BaseModel):
    """A connection between two nodes. Endpoints are not checked against the node set."""
    model_config = ConfigDict(extra="allow")

    source: str
    target: str


class Diagram(BaseModel):
    nodes: List[DiagramNode] = []
    edges: List[DiagramEdge] = []

    def to_json(self) -> dict:
        """Serialize with editor field names ("type", not "type_label")."""
        return self.model_dump(mode="json", by_alias=True)
