# /regflow/workflows/i18n.py

"""
Translation-key derivation for rendered elements.

Keys are derived from authored free text by case-insensitive substring
matching against ordered tables; the first matching needle wins, so specific
phrases are listed before the generic words they contain. An authored
``i18nRole`` on the field config takes precedence over the text heuristic.

All functions are pure.
"""

from typing import Any, List, Optional, Tuple

KeyTable = List[Tuple[str, str]]

LABEL_KEYS: KeyTable = [
    ("username", "sign.up.form.fields.username.label"),
    ("first name", "sign.up.form.fields.firstName.label"),
    ("last name", "sign.up.form.fields.lastName.label"),
    ("password", "sign.up.form.fields.password.label"),
    ("email", "sign.up.form.fields.email.label"),
]

# No password rule: password fields carry no placeholder key.
PLACEHOLDER_KEYS: KeyTable = [
    ("username", "sign.up.form.fields.username.placeholder"),
    ("first name", "sign.up.form.fields.firstName.placeholder"),
    ("last name", "sign.up.form.fields.lastName.placeholder"),
    ("email", "sign.up.form.fields.email.placeholder"),
]

BUTTON_TEXT_KEYS: KeyTable = [
    ("continue with password", "sign.up.form.button.continue.with.password"),
    ("continue with email otp", "sign.up.form.button.continue.with.email.otp"),
    ("continue with google", "sign.up.form.button.continue.with.google"),
    ("continue", "sign.up.form.button.continue"),
    ("next", "sign.up.form.button.next"),
    ("done", "sign.up.form.button.done"),
]

FIELD_ROLES = ("username", "firstName", "lastName", "password", "email")
BUTTON_ROLES = (
    "continue.with.password",
    "continue.with.email.otp",
    "continue.with.google",
    "continue",
    "next",
    "done",
)


def match_key(text: Any, table: KeyTable) -> str:
    """Return the key of the first needle found in ``text``, or ``text`` itself."""
    # Authored config is free-form; numbers and booleans are matched as their text.
    text = str(text)
    lower = text.lower()
    for needle, key in table:
        if needle in lower:
            return key
    return text


def map_label_to_i18n(label: Any, role: Optional[str] = None) -> str:
    if role in FIELD_ROLES:
        return f"sign.up.form.fields.{role}.label"
    if label is None or label == "":
        return ""
    return match_key(label, LABEL_KEYS)


def map_placeholder_to_i18n(placeholder: Any, role: Optional[str] = None) -> str:
    if role in FIELD_ROLES and role != "password":
        return f"sign.up.form.fields.{role}.placeholder"
    if placeholder is None or placeholder == "":
        return ""
    return match_key(placeholder, PLACEHOLDER_KEYS)


def map_action_text_to_i18n(text: Any, role: Optional[str] = None) -> str:
    if role in BUTTON_ROLES:
        return f"sign.up.form.button.{role}"
    return match_key(text, BUTTON_TEXT_KEYS)
