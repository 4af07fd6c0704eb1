# /regflow/models/flow.py

from typing import Optional, List, Dict, Any
from pydantic import BaseModel, ConfigDict, Field, model_validator


class AuthoringModel(BaseModel):
    """Base for authored definition parts; unknown authoring keys are preserved."""
    model_config = ConfigDict(extra="allow")


class Executor(AuthoringModel):
    """A named backend operation bound to a UI element."""
    id: Optional[str] = Field(default=None, description="Id of the element that triggers the executor")
    name: Optional[str] = Field(default=None, description="Executor name submitted by the client")


class ActionSpec(AuthoringModel):
    type: str = Field(..., description="Action type tag (NEXT, PREVIOUS, EXECUTOR, DONE)")
    executors: List[Executor] = Field(default_factory=list)

    @property
    def first_executor(self) -> Optional[Executor]:
        return self.executors[0] if self.executors else None


class NodeAction(AuthoringModel):
    """An action available from a node together with its target node references."""
    action: ActionSpec
    next: List[str] = Field(default_factory=list, description="Target node ids for NEXT/EXECUTOR")
    previous: List[str] = Field(default_factory=list, description="Target node ids for PREVIOUS")


class Node(AuthoringModel):
    id: str
    elements: List[str] = Field(default_factory=list, description="Referenced element or block ids, in render order")
    actions: List[NodeAction] = Field(default_factory=list)


class ElementConfig(AuthoringModel):
    field: Dict[str, Any] = Field(default_factory=dict)
    styles: Dict[str, Any] = Field(default_factory=dict)


class Element(AuthoringModel):
    id: str
    category: Optional[str] = None
    type: Optional[str] = None
    variant: Optional[str] = None
    config: ElementConfig = Field(default_factory=ElementConfig)


class Block(AuthoringModel):
    id: str
    nodes: List[str] = Field(default_factory=list, description="Grouped element ids, in render order")


class Page(AuthoringModel):
    id: Optional[str] = None
    nodes: List[str] = Field(default_factory=list)


class FlowLayout(AuthoringModel):
    pages: List[Page] = Field(default_factory=list)


class FlowDefinition(AuthoringModel):
    """
    An authored registration flow: pages, nodes, elements and blocks.

    The start node is the first node of the first page. Only presence checks
    are applied here; dangling element references are tolerated and resolved
    leniently at render time.
    """
    flow: FlowLayout
    nodes: List[Node] = Field(default_factory=list)
    elements: List[Element] = Field(default_factory=list)
    blocks: List[Block] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_presence(self):
        if not self.flow.pages or not self.flow.pages[0].nodes:
            raise ValueError("flow.pages[0].nodes must name a start node")

        seen = set()
        for node in self.nodes:
            if node.id in seen:
                raise ValueError(f"Duplicate node id '{node.id}'")
            seen.add(node.id)
        return self

    @property
    def start_node_id(self) -> str:
        return self.flow.pages[0].nodes[0]

    def find_node(self, node_id: str) -> Optional[Node]:
        return next((n for n in self.nodes if n.id == node_id), None)

    def find_element(self, element_id: str) -> Optional[Element]:
        return next((e for e in self.elements if e.id == element_id), None)

    def find_block(self, block_id: str) -> Optional[Block]:
        return next((b for b in self.blocks if b.id == block_id), None)
