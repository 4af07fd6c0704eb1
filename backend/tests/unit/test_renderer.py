# backend/tests/unit/test_renderer.py

from regflow.models.flow import FlowDefinition
from regflow.workflows.renderer import render_node


def test_render_flat_elements_in_order(definition):
    rendered = render_node(definition, definition.find_node("start"))

    assert [e.id for e in rendered.elements] == ["typo1", "input1", "btn1"]
    assert rendered.blocks == []


def test_render_expands_blocks_and_skips_unresolved(definition):
    """Blocks emit their descriptor, then their elements; dangling ids are skipped."""
    rendered = render_node(definition, definition.find_node("node2"))

    assert [b.model_dump() for b in rendered.blocks] == [
        {"id": "block1", "nodes": ["input2", "btn2", "ghost"]}
    ]
    assert [e.id for e in rendered.elements] == ["input2", "btn2", "divider1", "google1"]


def test_render_binds_executor_actions_per_node(definition):
    start = render_node(definition, definition.find_node("start"))
    btn1 = next(e for e in start.elements if e.id == "btn1")
    assert btn1.action.model_dump() == {"type": "EXECUTOR", "name": "password"}

    node2 = render_node(definition, definition.find_node("node2"))
    btn2 = next(e for e in node2.elements if e.id == "btn2")
    google1 = next(e for e in node2.elements if e.id == "google1")
    assert btn2.action is None
    assert google1.action.name == "google"


def test_username_label_key_on_start_node(definition):
    rendered = render_node(definition, definition.find_node("start"))
    input1 = next(e for e in rendered.elements if e.id == "input1")

    assert input1.properties["label"] == "sign.up.form.fields.username.label"
    assert input1.properties["placeholder"] == "sign.up.form.fields.username.placeholder"


def test_render_node_with_only_dangling_references(definition_dict):
    definition_dict["nodes"].append({"id": "empty", "elements": ["nope", "nada"]})
    definition = FlowDefinition.model_validate(definition_dict)

    rendered = render_node(definition, definition.find_node("empty"))

    assert rendered.elements == []
    assert rendered.blocks == []
