"""
Tests for the connection models and the polymorphic email option.
"""

import warnings

import pydantic
import pytest

from authmgmt import (
    Connection,
    ConnectionOptions,
    ConnectionOptionsEmail,
    ConnectionOptionsTotp,
    PasswordlessEmail,
)


def wire(model):
    return model.model_dump(mode="json", by_alias=True, exclude_unset=True)


class TestConnectionOptionsEmail:
    def test_object_decodes_as_passwordless_email(self):
        opts = ConnectionOptions.model_validate({"email": {"syntax": "liquid", "from": "a@b.com"}})

        email, ok = opts.email.get_passwordless_email()
        assert ok
        assert email.syntax == "liquid"
        assert email.from_ == "a@b.com"
        assert email.subject is None
        assert opts.email.get_bool() == (None, False)

    def test_empty_object_is_passwordless_email(self):
        opts = ConnectionOptions.model_validate({"email": {}})

        email, ok = opts.email.get_passwordless_email()
        assert ok
        assert email == PasswordlessEmail()

    @pytest.mark.parametrize("value", [True, False])
    def test_bool_decodes_as_bool(self, value):
        opts = ConnectionOptions.model_validate({"email": value})

        assert opts.email.get_bool() == (value, True)
        assert opts.email.get_passwordless_email() == (None, False)

    @pytest.mark.parametrize("value", ["unexpected", 1, ["a"], "true"])
    def test_other_values_fail(self, value):
        with pytest.raises(pydantic.ValidationError) as exc:
            ConnectionOptions.model_validate({"email": value})

        assert exc.value.errors()[0]["loc"][0] == "email"

    def test_null_leaves_field_empty(self):
        opts = ConnectionOptions.model_validate({"email": None})

        assert opts.email is None
        assert "email" in opts.model_fields_set

    def test_unset_reports_no_match(self):
        email = ConnectionOptionsEmail()

        assert email.get_bool() == (None, False)
        assert email.get_passwordless_email() == (None, False)
        assert email.model_dump() is None

    def test_setters_overwrite_previous_variant(self):
        email = ConnectionOptionsEmail()
        email.set_passwordless_email(PasswordlessEmail(syntax="liquid"))
        assert email.get_passwordless_email()[1]

        email.set_bool(True)
        assert email.get_bool() == (True, True)
        assert email.get_passwordless_email() == (None, False)

        email.set_passwordless_email(PasswordlessEmail(subject="Welcome"))
        assert email.get_bool() == (None, False)
        assert email.get_passwordless_email()[0].subject == "Welcome"

    def test_encodes_held_variant(self):
        as_object = ConnectionOptions(email=ConnectionOptionsEmail(PasswordlessEmail(syntax="liquid", from_="a@b.com")))
        as_bool = ConnectionOptions(email=ConnectionOptionsEmail(False))

        assert wire(as_object)["email"] == {"syntax": "liquid", "from": "a@b.com"}
        assert wire(as_bool)["email"] is False

    def test_encoding_held_email_object_emits_no_warnings(self):
        decoded = ConnectionOptions.model_validate({"email": {"from": "a@b.com"}})
        built = ConnectionOptions(email=ConnectionOptionsEmail(PasswordlessEmail(syntax="liquid")))

        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            assert wire(decoded)["email"] == {"from": "a@b.com"}
            assert wire(built)["email"] == {"syntax": "liquid"}
            assert built.email.model_dump(by_alias=True) == {
                "syntax": "liquid",
                "from": None,
                "subject": None,
                "body": None,
            }

        assert caught == []


class TestOmission:
    def test_only_name_set(self):
        assert wire(Connection(name="my-connection")) == {"name": "my-connection"}

    def test_options_always_carry_required_keys(self):
        data = wire(Connection(name="c", options=ConnectionOptions()))

        assert data == {
            "name": "c",
            "options": {"community_base_url": None, "strategy_version": None},
        }

    def test_required_keys_keep_their_values(self):
        opts = ConnectionOptions(community_base_url="https://community.example.com", strategy_version=2)

        assert wire(opts) == {"community_base_url": "https://community.example.com", "strategy_version": 2}

    def test_explicit_none_is_sent_as_null(self):
        data = wire(Connection(name="c", metadata=None, realms=None))

        assert data == {"name": "c", "metadata": None, "realms": None}

    def test_zero_values_are_sent(self):
        opts = ConnectionOptions(import_mode=False, client_id="", totp=ConnectionOptionsTotp(length=0))

        data = wire(opts)
        assert data["import_mode"] is False
        assert data["client_id"] == ""
        assert data["totp"] == {"length": 0}

    def test_camel_case_wire_keys(self):
        opts = ConnectionOptions(
            password_policy="fair",
            enabled_database_customization=True,
            custom_scripts={"login": "x"},
            from_="+15550100",
        )

        data = wire(opts)
        assert data["passwordPolicy"] == "fair"
        assert data["enabledDatabaseCustomization"] is True
        assert data["customScripts"] == {"login": "x"}
        assert data["from"] == "+15550100"


class TestRoundTrip:
    def test_set_fields_survive_and_unset_stay_unset(self):
        original = Connection(
            name="passwordless",
            strategy="email",
            enabled_clients=["client-a"],
            options=ConnectionOptions(
                brute_force_protection=False,
                disable_signup=True,
                totp=ConnectionOptionsTotp(time_step=300),
                email=ConnectionOptionsEmail(PasswordlessEmail(syntax="liquid", body="{{ code }}")),
                configuration={"API_KEY": "k"},
            ),
        )

        decoded = Connection.model_validate(wire(original))

        assert wire(decoded) == wire(original)
        assert decoded.id is None
        assert "id" not in decoded.model_fields_set
        assert "realms" not in decoded.model_fields_set
        assert decoded.options.brute_force_protection is False
        assert decoded.options.totp.time_step == 300
        assert "length" not in decoded.options.totp.model_fields_set
        assert decoded.options.import_mode is None
        assert "import_mode" not in decoded.options.model_fields_set
        assert decoded.options.email.get_passwordless_email()[0].body == "{{ code }}"

    def test_server_body_round_trips(self, sample_connection):
        decoded = Connection.model_validate(sample_connection)

        assert wire(decoded) == sample_connection
        assert decoded.options.password_policy == "good"
        assert decoded.options.custom_scripts["login"].startswith("function login")

    def test_attribute_names_accepted_on_decode(self):
        opts = ConnectionOptions.model_validate({"password_policy": "low", "custom_scripts": {"get_user": "x"}})

        assert opts.password_policy == "low"
        assert wire(opts)["customScripts"] == {"get_user": "x"}
