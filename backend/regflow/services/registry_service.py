# /regflow/services/registry_service.py

import logging
import threading
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, Union

import redis
from pydantic import ValidationError as PydanticValidationError

from regflow.config import strings
from regflow.models.flow import FlowDefinition
from regflow.utils.metrics import definitions_registered_counter
from regflow.workflows.errors import NotFoundError, ValidationError

# Storage for flow definitions keyed by application id. Registration replaces
# any previous definition wholesale (last write wins).

logger = logging.getLogger(__name__)

DefinitionInput = Union[FlowDefinition, Dict[str, Any]]


class FlowRegistry(ABC):
    """Base registry: argument checks and parsing shared by all backends."""

    def register(self, app_id: Optional[str], definition: Optional[DefinitionInput]) -> FlowDefinition:
        if not app_id or not definition:
            raise ValidationError(strings.MISSING_REGISTER_FIELDS)

        parsed = self._parse(definition)
        self._store(app_id, parsed)
        definitions_registered_counter.inc()
        logger.info(f"Registered flow definition for app '{app_id}' ({len(parsed.nodes)} nodes).")
        return parsed

    def lookup(self, app_id: str) -> FlowDefinition:
        definition = self._load(app_id)
        if definition is None:
            raise NotFoundError(f"No flow definition found for appId '{app_id}'.")
        return definition

    def ping(self) -> bool:
        """Readiness check for the backing store."""
        return True

    @staticmethod
    def _parse(definition: DefinitionInput) -> FlowDefinition:
        if isinstance(definition, FlowDefinition):
            return definition
        try:
            return FlowDefinition.model_validate(definition)
        except PydanticValidationError as e:
            raise ValidationError(f"Invalid flowDefinition: {e.errors(include_url=False)}") from e

    @abstractmethod
    def _store(self, app_id: str, definition: FlowDefinition) -> None:
        ...

    @abstractmethod
    def _load(self, app_id: str) -> Optional[FlowDefinition]:
        ...


class InMemoryFlowRegistry(FlowRegistry):
    def __init__(self):
        self._definitions: Dict[str, FlowDefinition] = {}
        self._lock = threading.RLock()
        logger.info("InMemoryFlowRegistry initialized.")

    def _store(self, app_id: str, definition: FlowDefinition) -> None:
        with self._lock:
            self._definitions[app_id] = definition

    def _load(self, app_id: str) -> Optional[FlowDefinition]:
        with self._lock:
            return self._definitions.get(app_id)


class RedisFlowRegistry(FlowRegistry):
    """Stores each definition as a JSON document under ``<prefix><appId>``."""

    def __init__(self, redis_client: redis.Redis, key_prefix: str = "regflow:definition:"):
        self.redis = redis_client
        self.key_prefix = key_prefix
        logger.info("RedisFlowRegistry initialized.")

    @classmethod
    def from_url(cls, redis_url: str, key_prefix: str = "regflow:definition:") -> "RedisFlowRegistry":
        return cls(redis.Redis.from_url(redis_url), key_prefix)

    def ping(self) -> bool:
        return bool(self.redis.ping())

    def _key(self, app_id: str) -> str:
        return f"{self.key_prefix}{app_id}"

    def _store(self, app_id: str, definition: FlowDefinition) -> None:
        self.redis.set(self._key(app_id), definition.model_dump_json())

    def _load(self, app_id: str) -> Optional[FlowDefinition]:
        raw = self.redis.get(self._key(app_id))
        if raw is None:
            return None
        if isinstance(raw, bytes):
            raw = raw.decode("utf-8")
        return FlowDefinition.model_validate_json(raw)
