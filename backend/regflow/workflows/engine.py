# /regflow/workflows/engine.py

"""
Registration flow engine.

Drives a client through a registered flow definition:
- initiate creates a session whose cursor is the definition's start node
- submit resolves the submitted action on the cursor node, moves the cursor
  to the action's target node, and renders it
- a DONE action closes the submitted session

The engine holds no cursor state itself; every cursor lives in the session
store, keyed by flow id.
"""

from typing import Any, Callable, Dict, Optional, Union

import structlog

from regflow.config import strings
from regflow.models.api import CompletionResponse, FlowResponse, RenderedNode
from regflow.models.flow import FlowDefinition, Node, NodeAction
from regflow.models.session import FlowSession, FlowStatus
from regflow.services.registry_service import FlowRegistry
from regflow.services.session_service import SessionStore
from regflow.utils.metrics import flow_actions_counter, flows_completed_counter, flows_initiated_counter
from regflow.workflows.errors import (
    FlowCompletedError,
    FlowConsistencyError,
    FlowError,
    NotFoundError,
    TransitionError,
    UnsupportedActionTypeError,
    ValidationError,
)
from regflow.workflows.renderer import render_node
from regflow.workflows.resolver import ActionMatchPolicy, resolve_action

log = structlog.get_logger(__name__)

DEFAULT_FLOW_TYPE = "REGISTRATION"

InputForwarder = Callable[[FlowSession, str, Optional[Dict[str, Any]]], None]


class FlowEngine:
    def __init__(
        self,
        registry: FlowRegistry,
        sessions: SessionStore,
        match_policy: ActionMatchPolicy = ActionMatchPolicy.FIRST,
        flow_type: str = DEFAULT_FLOW_TYPE,
        input_forwarder: Optional[InputForwarder] = None,
    ):
        self.registry = registry
        self.sessions = sessions
        self.match_policy = match_policy
        self.flow_type = flow_type
        self.input_forwarder = input_forwarder

    def initiate(self, app_id: Optional[str]) -> FlowResponse:
        if not app_id:
            raise ValidationError(strings.MISSING_INITIATE_FIELDS)

        definition = self.registry.lookup(app_id)
        start_node_id = definition.start_node_id
        start_node = self._require_node(definition, start_node_id)

        rendered = render_node(definition, start_node)
        session = self.sessions.create(app_id, start_node_id)
        flows_initiated_counter.labels(app_id=app_id).inc()
        log.info("Flow initiated.", app_id=app_id, flow_id=session.flow_id, node_id=start_node_id)
        return self._response(session.flow_id, rendered)

    def submit(
        self,
        app_id: Optional[str],
        flow_id: Optional[str],
        action: Optional[str],
        inputs: Optional[Dict[str, Any]] = None,
    ) -> Union[FlowResponse, CompletionResponse]:
        if not app_id or not flow_id or not action:
            raise ValidationError(strings.MISSING_SUBMIT_FIELDS)

        try:
            response = self._submit(app_id, flow_id, action, inputs)
        except FlowError as e:
            flow_actions_counter.labels(action_type="unknown", status=e.error_code.lower()).inc()
            log.warning("Flow action rejected.", app_id=app_id, flow_id=flow_id, action=action, error_code=e.error_code, reason=e.message)
            raise
        return response

    # ==================== Helper Methods ====================

    def _submit(self, app_id: str, flow_id: str, action: str, inputs: Optional[Dict[str, Any]]):
        definition = self.registry.lookup(app_id)
        session = self.sessions.get(flow_id)
        if session.app_id != app_id:
            raise NotFoundError(f"No flow found for flowId '{flow_id}'.")
        if session.is_completed:
            raise FlowCompletedError(f"Flow '{flow_id}' is already completed.")

        current_node = self._require_node(definition, session.current_node_id)
        node_action = resolve_action(current_node, action, self.match_policy)
        action_type = node_action.action.type.upper()

        if action_type == "DONE":
            self._forward_inputs(session, action, inputs)
            self.sessions.complete(flow_id)
            flows_completed_counter.inc()
            flow_actions_counter.labels(action_type=action_type, status="completed").inc()
            log.info("Flow completed.", app_id=app_id, flow_id=flow_id, node_id=current_node.id, input_count=len(inputs or {}))
            return CompletionResponse(
                flow_id=flow_id,
                flow_status=FlowStatus.COMPLETED,
                flow_type=self.flow_type,
                message=strings.FLOW_COMPLETED,
            )

        target_id = self._target_node_id(node_action, action_type)
        target_node = definition.find_node(target_id)
        if target_node is None:
            raise TransitionError(f"Target node '{target_id}' of action '{action}' does not exist.")

        rendered = render_node(definition, target_node)
        self._forward_inputs(session, action, inputs)
        self.sessions.advance(flow_id, target_id)
        flow_actions_counter.labels(action_type=action_type, status="advanced").inc()
        log.info(
            "Flow advanced.",
            app_id=app_id,
            flow_id=flow_id,
            action=action,
            from_node=current_node.id,
            to_node=target_id,
            input_count=len(inputs or {}),
        )
        return self._response(flow_id, rendered)

    def _forward_inputs(self, session: FlowSession, action: str, inputs: Optional[Dict[str, Any]]) -> None:
        """Hand submitted field values to the external collaborator untouched."""
        if self.input_forwarder is not None:
            self.input_forwarder(session, action, inputs)

    @staticmethod
    def _target_node_id(node_action: NodeAction, action_type: str) -> str:
        if action_type in ("NEXT", "EXECUTOR"):
            targets = node_action.next
        elif action_type == "PREVIOUS":
            targets = node_action.previous
        else:
            raise UnsupportedActionTypeError(f"Unsupported action type '{node_action.action.type}'.")

        if not targets or not targets[0]:
            raise TransitionError("No next or previous node available for action.")
        return targets[0]

    @staticmethod
    def _require_node(definition: FlowDefinition, node_id: str) -> Node:
        node = definition.find_node(node_id)
        if node is None:
            raise FlowConsistencyError(f"Node '{node_id}' is missing from the flow definition.")
        return node

    def _response(self, flow_id: str, rendered: RenderedNode) -> FlowResponse:
        return FlowResponse(
            flow_id=flow_id,
            flow_status=FlowStatus.INCOMPLETE,
            flow_type=self.flow_type,
            elements=rendered.elements,
            blocks=rendered.blocks,
        )
