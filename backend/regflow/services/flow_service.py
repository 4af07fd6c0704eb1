# /regflow/services/flow_service.py

import logging

from regflow.config.settings import Settings, settings
from regflow.services.registry_service import FlowRegistry, InMemoryFlowRegistry, RedisFlowRegistry
from regflow.services.session_service import SessionStore
from regflow.workflows.engine import FlowEngine
from regflow.workflows.resolver import ActionMatchPolicy

# Assembles the process-wide registry, session store and engine from settings.

logger = logging.getLogger(__name__)


def build_registry(settings_obj: Settings) -> FlowRegistry:
    if settings_obj.definition_store == "redis":
        logger.info(f"Using Redis definition store at {settings_obj.redis_url}")
        return RedisFlowRegistry.from_url(settings_obj.redis_url, settings_obj.redis_key_prefix)
    return InMemoryFlowRegistry()


def build_engine(settings_obj: Settings) -> FlowEngine:
    return FlowEngine(
        registry=build_registry(settings_obj),
        sessions=SessionStore(),
        match_policy=ActionMatchPolicy(settings_obj.action_match_policy),
        flow_type=settings_obj.flow_type,
    )


# Globally accessible instance
flow_engine = build_engine(settings)
