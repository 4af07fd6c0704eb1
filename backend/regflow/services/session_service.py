# /regflow/services/session_service.py

import logging
import threading
import uuid
from datetime import datetime
from typing import Callable, Dict

from regflow.models.session import FlowSession, FlowStatus
from regflow.utils.metrics import active_sessions_gauge
from regflow.workflows.errors import FlowCompletedError, NotFoundError

logger = logging.getLogger(__name__)


def generate_flow_id() -> str:
    return str(uuid.uuid4())


class SessionStore:
    """
    Owns every flow's cursor, keyed by flow id.

    All reads and writes go through one lock; callers receive copies so no
    cursor state lives outside the store.
    """

    def __init__(self, id_factory: Callable[[], str] = generate_flow_id):
        self._sessions: Dict[str, FlowSession] = {}
        self._lock = threading.RLock()
        self._id_factory = id_factory
        logger.info("SessionStore initialized.")

    def create(self, app_id: str, start_node_id: str) -> FlowSession:
        with self._lock:
            flow_id = self._id_factory()
            while flow_id in self._sessions:
                flow_id = self._id_factory()
            session = FlowSession(flow_id=flow_id, app_id=app_id, current_node_id=start_node_id)
            self._sessions[flow_id] = session
            active_sessions_gauge.inc()
            return session.model_copy()

    def get(self, flow_id: str) -> FlowSession:
        with self._lock:
            return self._require(flow_id).model_copy()

    def advance(self, flow_id: str, node_id: str) -> FlowSession:
        with self._lock:
            session = self._require_open(flow_id)
            session.current_node_id = node_id
            self._touch(session)
            return session.model_copy()

    def complete(self, flow_id: str) -> FlowSession:
        with self._lock:
            session = self._require_open(flow_id)
            session.status = FlowStatus.COMPLETED
            self._touch(session)
            active_sessions_gauge.dec()
            return session.model_copy()

    def remove(self, flow_id: str) -> FlowSession:
        """Drop a session, e.g. from an expiry job. Returns the removed session."""
        with self._lock:
            session = self._sessions.pop(flow_id, None)
            if session is None:
                raise NotFoundError(f"No flow found for flowId '{flow_id}'.")
            if not session.is_completed:
                active_sessions_gauge.dec()
            return session

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)

    # ==================== Helper Methods ====================

    def _require(self, flow_id: str) -> FlowSession:
        session = self._sessions.get(flow_id)
        if session is None:
            raise NotFoundError(f"No flow found for flowId '{flow_id}'.")
        return session

    def _require_open(self, flow_id: str) -> FlowSession:
        session = self._require(flow_id)
        if session.is_completed:
            raise FlowCompletedError(f"Flow '{flow_id}' is already completed.")
        return session

    @staticmethod
    def _touch(session: FlowSession) -> None:
        session.version += 1
        session.updated_at = datetime.utcnow()
