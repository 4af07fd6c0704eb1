# backend/tests/unit/test_resolver.py

import pytest

from regflow.models.flow import Node
from regflow.workflows.errors import ActionNotFoundError
from regflow.workflows.resolver import ActionMatchPolicy, resolve_action


@pytest.fixture
def node():
    return Node.model_validate({
        "id": "n1",
        "actions": [
            {"action": {"type": "EXECUTOR", "executors": [{"id": "b1", "name": "password"}]}, "next": ["a"]},
            {"action": {"type": "NEXT"}, "next": ["b"]},
            {"action": {"type": "EXECUTOR", "executors": [{"id": "b2", "name": "NEXT"}]}, "next": ["c"]},
            {"action": {"type": "PREVIOUS", "executors": []}, "previous": ["d"]},
        ],
    })


def test_matches_by_executor_name(node):
    assert resolve_action(node, "password").next == ["a"]


def test_matches_by_raw_type(node):
    assert resolve_action(node, "PREVIOUS").previous == ["d"]


def test_type_match_is_case_sensitive(node):
    with pytest.raises(ActionNotFoundError):
        resolve_action(node, "previous")


def test_first_match_policy_is_default(node):
    assert resolve_action(node, "NEXT").next == ["b"]


def test_last_match_policy(node):
    assert resolve_action(node, "NEXT", ActionMatchPolicy.LAST).next == ["c"]


def test_only_first_executor_name_is_considered():
    node = Node.model_validate({
        "id": "n1",
        "actions": [{
            "action": {"type": "EXECUTOR", "executors": [{"id": "b1", "name": "a"}, {"id": "b2", "name": "b"}]},
            "next": ["x"],
        }],
    })
    with pytest.raises(ActionNotFoundError):
        resolve_action(node, "b")


def test_unknown_action_raises(node):
    with pytest.raises(ActionNotFoundError, match="not found on node 'n1'"):
        resolve_action(node, "google")
