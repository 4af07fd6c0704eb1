# /regflow/models/session.py

from datetime import datetime
from enum import Enum
from pydantic import BaseModel, Field


class FlowStatus(str, Enum):
    INCOMPLETE = "INCOMPLETE"
    COMPLETED = "COMPLETED"


class FlowSession(BaseModel):
    """
    Per-flow cursor state. Owned by the session store; the engine only ever
    sees copies.
    """
    flow_id: str = Field(..., description="Opaque flow identifier")
    app_id: str = Field(..., description="Application that owns the flow")
    current_node_id: str = Field(..., description="Cursor: the currently active node")
    status: FlowStatus = Field(default=FlowStatus.INCOMPLETE)
    version: int = Field(default=1, description="Incremented on every cursor change")
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)

    @property
    def is_completed(self) -> bool:
        return self.status == FlowStatus.COMPLETED
