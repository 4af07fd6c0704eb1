# /regflow/workflows/elements.py

"""
Element to presentation mapping.

Each authored element is classified into a closed set of kinds from its
(category, type) pair, and every kind has exactly one handler that builds
the renderable ``properties``. Whether an element also triggers an executor
is derived from the node's actions at render time; it is never stored on the
element itself.
"""

from enum import Enum
from typing import Any, Callable, Dict, Optional

from regflow.models.api import ActionOutput, ElementOutput
from regflow.models.flow import Element, FlowDefinition, Node
from regflow.workflows.i18n import (
    map_action_text_to_i18n,
    map_label_to_i18n,
    map_placeholder_to_i18n,
)

EXECUTOR = "EXECUTOR"

TYPOGRAPHY_CLASS = "wso2is-typography-h3"
TYPOGRAPHY_TITLE_KEY = "sign.up.form.title"
DIVIDER_CLASS = "wso2is-divider-horizontal"
USERNAME_INPUT_CLASS = "wso2is-username-input"
TEXT_INPUT_CLASS = "wso2is-text-input"
PRIMARY_BUTTON_CLASS = "wso2is-button"
SOCIAL_BUTTON_CLASS = "wso2is-social-button"
SOCIAL_VARIANTS = ("SOCIAL", "SOCIAL_BUTTON")

EMAIL_PATTERN = r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$"


class ElementKind(str, Enum):
    TYPOGRAPHY = "TYPOGRAPHY"
    DIVIDER = "DIVIDER"
    INPUT = "INPUT"
    BUTTON = "BUTTON"
    UNKNOWN = "UNKNOWN"


_KIND_BY_CATEGORY_TYPE = {
    ("DISPLAY", "TYPOGRAPHY"): ElementKind.TYPOGRAPHY,
    ("DISPLAY", "DIVIDER"): ElementKind.DIVIDER,
    ("FIELD", "INPUT"): ElementKind.INPUT,
    ("ACTION", "BUTTON"): ElementKind.BUTTON,
}


def classify(element: Element) -> ElementKind:
    return _KIND_BY_CATEGORY_TYPE.get((element.category, element.type), ElementKind.UNKNOWN)


def resolve_executor_action(element: Element, node: Node) -> Optional[ActionOutput]:
    """
    Return the EXECUTOR action bound to ``element`` on ``node``, if any.

    An element is an executor trigger when an EXECUTOR-typed action on the
    node names it as its first executor.
    """
    for node_action in node.actions:
        executor = node_action.action.first_executor
        if executor is None or executor.id != element.id:
            continue
        if node_action.action.type == EXECUTOR:
            return ActionOutput(type=EXECUTOR, name=executor.name)
    return None


# ---------------- Per-kind handlers ---------------- #

PropertiesHandler = Callable[[Element, Optional[ActionOutput]], Dict[str, Any]]


def _typography_properties(element: Element, action: Optional[ActionOutput]) -> Dict[str, Any]:
    return {
        "className": TYPOGRAPHY_CLASS,
        "text": TYPOGRAPHY_TITLE_KEY,
        "styles": {"textAlign": "center"},
    }


def _divider_properties(element: Element, action: Optional[ActionOutput]) -> Dict[str, Any]:
    field = element.config.field
    return {
        "className": DIVIDER_CLASS,
        "text": field.get("text") or "Or",
        "styles": {},
    }


def _input_properties(element: Element, action: Optional[ActionOutput]) -> Dict[str, Any]:
    field = element.config.field
    role = field.get("i18nRole")
    required = bool(field.get("required"))

    properties = {
        "type": field.get("type") or "text",
        "name": field.get("name") or "",
        "hint": field.get("hint") or "",
        "label": map_label_to_i18n(field.get("label"), role),
        "placeholder": map_placeholder_to_i18n(field.get("placeholder"), role),
        "required": required,
        "multiline": bool(field.get("multiline")),
        "defaultValue": field.get("defaultValue") or "",
        "value": "",
        "dataType": "string",
        "isRequired": required,
        "isReadOnly": False,
    }

    if properties["name"] == "username":
        properties["className"] = USERNAME_INPUT_CLASS
        properties["validationRegex"] = EMAIL_PATTERN
    else:
        properties["className"] = TEXT_INPUT_CLASS

    for limit in ("minLength", "maxLength"):
        if field.get(limit) is not None:
            properties[limit] = field[limit]

    properties["styles"] = {}
    return properties


def _button_properties(element: Element, action: Optional[ActionOutput]) -> Dict[str, Any]:
    field = element.config.field

    if action is not None and action.type == EXECUTOR:
        class_name = PRIMARY_BUTTON_CLASS
    else:
        class_name = SOCIAL_BUTTON_CLASS
    # Social variants always render as social buttons, even when bound to an executor.
    if element.variant in SOCIAL_VARIANTS:
        class_name = SOCIAL_BUTTON_CLASS

    text = field.get("text") or field.get("label") or "Submit"
    return {
        "type": field.get("type") or "submit",
        "className": class_name,
        "text": map_action_text_to_i18n(text, field.get("i18nRole")),
        "styles": {"width": "100%"},
    }


def _unknown_properties(element: Element, action: Optional[ActionOutput]) -> Dict[str, Any]:
    return {}


HANDLERS: Dict[ElementKind, PropertiesHandler] = {
    ElementKind.TYPOGRAPHY: _typography_properties,
    ElementKind.DIVIDER: _divider_properties,
    ElementKind.INPUT: _input_properties,
    ElementKind.BUTTON: _button_properties,
    ElementKind.UNKNOWN: _unknown_properties,
}

_missing = set(ElementKind) - set(HANDLERS)
if _missing:
    raise RuntimeError(f"No properties handler for element kinds: {sorted(k.value for k in _missing)}")


def transform_element(element: Element, definition: FlowDefinition, node: Node) -> ElementOutput:
    """Map an authored element to its renderable form on ``node``."""
    action = resolve_executor_action(element, node)
    properties = HANDLERS[classify(element)](element, action)
    return ElementOutput(
        id=element.id,
        category=element.category,
        type=element.type,
        variant=element.variant,
        action=action,
        properties=properties,
    )
