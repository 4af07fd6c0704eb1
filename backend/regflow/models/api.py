# /regflow/models/api.py

from pydantic import BaseModel, ConfigDict, Field
from typing import List, Dict, Optional, Any

from regflow.models.session import FlowStatus

# Request and response bodies for the flow endpoints. Wire names are
# camelCase; required fields are Optional here so that missing values surface
# as the engine's ValidationError rather than a framework 422.


class CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class RegisterFlowRequest(CamelModel):
    app_id: Optional[str] = Field(default=None, alias="appId")
    flow_definition: Optional[Dict[str, Any]] = Field(default=None, alias="flowDefinition")


class InitiateFlowRequest(CamelModel):
    app_id: Optional[str] = Field(default=None, alias="appId")


class SubmitActionRequest(CamelModel):
    app_id: Optional[str] = Field(default=None, alias="appId")
    flow_id: Optional[str] = Field(default=None, alias="flowId")
    action: Optional[str] = None
    inputs: Optional[Dict[str, Any]] = None


class MessageResponse(BaseModel):
    message: str


class ActionOutput(BaseModel):
    type: str
    name: Optional[str] = None


class ElementOutput(BaseModel):
    id: str
    category: Optional[str] = None
    type: Optional[str] = None
    variant: Optional[str] = None
    action: Optional[ActionOutput] = None
    properties: Dict[str, Any] = Field(default_factory=dict)


class BlockOutput(BaseModel):
    id: str
    nodes: List[str] = Field(default_factory=list)


class RenderedNode(BaseModel):
    elements: List[ElementOutput] = Field(default_factory=list)
    blocks: List[BlockOutput] = Field(default_factory=list)


class FlowResponse(CamelModel):
    flow_id: str = Field(..., alias="flowId")
    flow_status: FlowStatus = Field(default=FlowStatus.INCOMPLETE, alias="flowStatus")
    flow_type: str = Field(..., alias="flowType")
    elements: List[ElementOutput] = Field(default_factory=list)
    blocks: List[BlockOutput] = Field(default_factory=list)


class CompletionResponse(CamelModel):
    flow_id: str = Field(..., alias="flowId")
    flow_status: FlowStatus = Field(default=FlowStatus.COMPLETED, alias="flowStatus")
    flow_type: str = Field(..., alias="flowType")
    message: str
