# /regflow/routes/flows.py

from typing import Any, Dict
from fastapi import APIRouter, Depends
from pydantic import BaseModel

from regflow.config import strings
from regflow.models.api import (
    InitiateFlowRequest,
    MessageResponse,
    RegisterFlowRequest,
    SubmitActionRequest,
)
from regflow.utils.dependencies import get_flow_engine
from regflow.workflows.engine import FlowEngine

# Registration, initiation and submission endpoints. Engine errors are
# turned into structured responses by the FlowError handler in main.py.
# Handlers are plain functions: the engine and the Redis store block, so
# FastAPI runs them in its threadpool.

router = APIRouter(tags=["Flows"])


def to_body(model: BaseModel) -> Dict[str, Any]:
    """Serialize a response model with wire (camelCase) names, dropping unset optionals."""
    return model.model_dump(mode="json", by_alias=True, exclude_none=True)


@router.post("/registration-flow", response_model=MessageResponse)
def register_flow(body: RegisterFlowRequest, engine: FlowEngine = Depends(get_flow_engine)):
    engine.registry.register(body.app_id, body.flow_definition)
    return MessageResponse(message=strings.FLOW_REGISTERED)


@router.post("/initiate", response_model=None)
def initiate_flow(body: InitiateFlowRequest, engine: FlowEngine = Depends(get_flow_engine)):
    response = engine.initiate(body.app_id)
    return to_body(response)


@router.post("/submit", response_model=None)
def submit_action(body: SubmitActionRequest, engine: FlowEngine = Depends(get_flow_engine)):
    response = engine.submit(body.app_id, body.flow_id, body.action, body.inputs)
    return to_body(response)
