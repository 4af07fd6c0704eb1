# backend/tests/unit/test_i18n.py

import pytest

from regflow.workflows.i18n import (
    map_action_text_to_i18n,
    map_label_to_i18n,
    map_placeholder_to_i18n,
)


class TestLabelMapping:

    @pytest.mark.parametrize("label, expected", [
        ("Username", "sign.up.form.fields.username.label"),
        ("Your USERNAME (email)", "sign.up.form.fields.username.label"),
        ("First Name", "sign.up.form.fields.firstName.label"),
        ("last name", "sign.up.form.fields.lastName.label"),
        ("Password", "sign.up.form.fields.password.label"),
        ("Email address", "sign.up.form.fields.email.label"),
    ])
    def test_known_labels(self, label, expected):
        assert map_label_to_i18n(label) == expected

    def test_priority_order_wins_over_position(self):
        """'username' is checked before 'email' even when both appear."""
        assert map_label_to_i18n("Email or username") == "sign.up.form.fields.username.label"

    def test_unknown_label_returned_unchanged(self):
        assert map_label_to_i18n("Date of birth") == "Date of birth"

    def test_missing_label_is_empty(self):
        assert map_label_to_i18n(None) == ""
        assert map_label_to_i18n("") == ""

    def test_role_overrides_text(self):
        assert map_label_to_i18n("Given name", role="firstName") == "sign.up.form.fields.firstName.label"

    def test_unknown_role_falls_back_to_text(self):
        assert map_label_to_i18n("Last Name", role="nickname") == "sign.up.form.fields.lastName.label"


class TestPlaceholderMapping:

    def test_known_placeholders(self):
        assert map_placeholder_to_i18n("Enter your username") == "sign.up.form.fields.username.placeholder"
        assert map_placeholder_to_i18n("Enter your email") == "sign.up.form.fields.email.placeholder"

    def test_no_password_rule(self):
        assert map_placeholder_to_i18n("Enter your password") == "Enter your password"
        assert map_placeholder_to_i18n("Secret", role="password") == "Secret"

    def test_missing_placeholder_is_empty(self):
        assert map_placeholder_to_i18n(None) == ""


class TestActionTextMapping:

    @pytest.mark.parametrize("text, expected", [
        ("Continue with Password", "sign.up.form.button.continue.with.password"),
        ("Continue with Email OTP", "sign.up.form.button.continue.with.email.otp"),
        ("Continue with Google", "sign.up.form.button.continue.with.google"),
        ("Continue", "sign.up.form.button.continue"),
        ("Next", "sign.up.form.button.next"),
        ("Done", "sign.up.form.button.done"),
    ])
    def test_known_texts(self, text, expected):
        assert map_action_text_to_i18n(text) == expected

    def test_specific_phrase_not_shadowed_by_generic(self):
        assert map_action_text_to_i18n("Continue with Google") != "sign.up.form.button.continue"

    def test_unknown_text_returned_unchanged(self):
        assert map_action_text_to_i18n("Submit") == "Submit"

    def test_role_overrides_text(self):
        assert map_action_text_to_i18n("Sign in via G", role="continue.with.google") == \
            "sign.up.form.button.continue.with.google"


class TestNonStringText:

    def test_numeric_label_is_matched_as_text(self):
        assert map_label_to_i18n(7) == "7"

    def test_numeric_button_text_is_matched_as_text(self):
        assert map_action_text_to_i18n(5) == "5"

    def test_boolean_placeholder_is_matched_as_text(self):
        assert map_placeholder_to_i18n(True) == "True"
