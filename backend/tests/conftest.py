import os
import copy
import itertools

import pytest
from fastapi.testclient import TestClient
from dotenv import load_dotenv

# Load the test environment FIRST, before any application imports, so that
# settings are built from it.
load_dotenv(dotenv_path=os.path.join(os.path.dirname(__file__), "..", ".env.test"), override=True)

from regflow.main import app  # noqa: E402
from regflow.models.flow import FlowDefinition  # noqa: E402
from regflow.services.registry_service import InMemoryFlowRegistry  # noqa: E402
from regflow.services.session_service import SessionStore  # noqa: E402
from regflow.utils.dependencies import get_flow_engine  # noqa: E402
from regflow.workflows.engine import FlowEngine  # noqa: E402


SAMPLE_DEFINITION = {
    "flow": {"pages": [{"id": "page1", "nodes": ["start", "node2", "node3"]}]},
    "nodes": [
        {
            "id": "start",
            "elements": ["typo1", "input1", "btn1"],
            "actions": [
                {
                    "action": {"type": "EXECUTOR", "executors": [{"id": "btn1", "name": "password"}]},
                    "next": ["node2"],
                }
            ],
        },
        {
            "id": "node2",
            "elements": ["block1", "divider1", "google1", "missing-el"],
            "actions": [
                {
                    "action": {"type": "NEXT", "executors": [{"id": "btn2", "name": "continue"}]},
                    "next": ["node3"],
                },
                {"action": {"type": "PREVIOUS"}, "previous": ["start"]},
                {
                    "action": {"type": "EXECUTOR", "executors": [{"id": "google1", "name": "google"}]},
                    "next": ["node3"],
                },
            ],
        },
        {
            "id": "node3",
            "elements": ["btn3"],
            "actions": [
                {"action": {"type": "DONE", "executors": [{"id": "btn3", "name": "finish"}]}},
            ],
        },
    ],
    "elements": [
        {"id": "typo1", "category": "DISPLAY", "type": "TYPOGRAPHY", "variant": "H3",
         "config": {"field": {"text": "Create an account"}, "styles": {}}},
        {"id": "input1", "category": "FIELD", "type": "INPUT", "variant": "TEXT",
         "config": {"field": {"type": "text", "name": "username", "label": "Username",
                              "placeholder": "Enter your username", "required": True},
                    "styles": {}}},
        {"id": "btn1", "category": "ACTION", "type": "BUTTON", "variant": "PRIMARY",
         "config": {"field": {"type": "submit", "text": "Continue with Password"}, "styles": {}}},
        {"id": "input2", "category": "FIELD", "type": "INPUT",
         "config": {"field": {"name": "firstName", "label": "First Name",
                              "placeholder": "Enter your first name", "minLength": 2},
                    "styles": {}}},
        {"id": "btn2", "category": "ACTION", "type": "BUTTON", "variant": "PRIMARY",
         "config": {"field": {"text": "Continue"}, "styles": {}}},
        {"id": "divider1", "category": "DISPLAY", "type": "DIVIDER", "config": {"field": {}, "styles": {}}},
        {"id": "google1", "category": "ACTION", "type": "BUTTON", "variant": "SOCIAL",
         "config": {"field": {"text": "Continue with Google"}, "styles": {}}},
        {"id": "btn3", "category": "ACTION", "type": "BUTTON", "config": {"field": {"label": "Done"}}},
    ],
    "blocks": [
        {"id": "block1", "nodes": ["input2", "btn2", "ghost"]},
    ],
}


@pytest.fixture
def definition_dict():
    """A fresh copy of the sample registration flow definition."""
    return copy.deepcopy(SAMPLE_DEFINITION)


@pytest.fixture
def definition(definition_dict):
    return FlowDefinition.model_validate(definition_dict)


@pytest.fixture
def flow_ids():
    counter = itertools.count(1)
    return lambda: f"flow-{next(counter)}"


@pytest.fixture
def engine(flow_ids):
    """An engine over empty in-memory stores with predictable flow ids."""
    return FlowEngine(registry=InMemoryFlowRegistry(), sessions=SessionStore(id_factory=flow_ids))


@pytest.fixture
def registered_engine(engine, definition_dict):
    engine.registry.register("app-1", definition_dict)
    return engine


@pytest.fixture(scope="function")
def test_client(engine):
    """
    Provides a TestClient whose routes use an isolated engine, so tests never
    share registered definitions or sessions.
    """
    app.dependency_overrides[get_flow_engine] = lambda: engine
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()
