# /regflow/workflows/resolver.py

"""
Resolution of a submitted action name against a node's actions.

An action matches when its first executor's name equals the submitted name,
or when its raw type tag equals it (case-sensitive, before normalization).
When several actions match, the configured policy decides which one wins.
"""

from enum import Enum
from typing import Optional

from regflow.models.flow import Node, NodeAction
from regflow.workflows.errors import ActionNotFoundError


class ActionMatchPolicy(str, Enum):
    FIRST = "first"  # first match in declaration order wins
    LAST = "last"    # last match in declaration order wins


def action_matches(node_action: NodeAction, submitted_name: str) -> bool:
    executor = node_action.action.first_executor
    if executor is not None and executor.name == submitted_name:
        return True
    return node_action.action.type == submitted_name


def resolve_action(
    node: Node,
    submitted_name: str,
    policy: ActionMatchPolicy = ActionMatchPolicy.FIRST,
) -> NodeAction:
    matched: Optional[NodeAction] = None
    for node_action in node.actions:
        if not action_matches(node_action, submitted_name):
            continue
        matched = node_action
        if policy == ActionMatchPolicy.FIRST:
            break

    if matched is None:
        raise ActionNotFoundError(f"Action '{submitted_name}' not found on node '{node.id}'.")
    return matched
