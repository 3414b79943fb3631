"""Connection types.

Every field is optional. Only fields that were set (on construction, by
assignment, or by being present in a decoded body) are sent, so dump with
``model_dump(by_alias=True, exclude_unset=True)``. A field explicitly set to
``None`` is sent as ``null``.
"""

from __future__ import annotations

from typing import Any, Optional, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    RootModel,
    SerializationInfo,
    SerializerFunctionWrapHandler,
    StrictBool,
    TypeAdapter,
    field_serializer,
    field_validator,
    model_serializer,
)
from pydantic import ValidationError as PydanticValidationError

from .common import ListPage


class PasswordlessEmail(BaseModel):
    """Email template for one-time-code login by email."""

    model_config = ConfigDict(populate_by_name=True)

    # only "liquid" is accepted by the API
    syntax: Optional[str] = None
    from_: Optional[str] = Field(default=None, alias="from")
    subject: Optional[str] = None
    body: Optional[str] = None


_EMAIL_VARIANTS: tuple[TypeAdapter[Any], ...] = (
    TypeAdapter(PasswordlessEmail),
    TypeAdapter(StrictBool),
)


class ConnectionOptionsEmail(RootModel):
    """Either a ``PasswordlessEmail`` or a bool, never both.

    The passwordless "email" strategy sends a template object under this key
    while google-oauth2 sends a bool. The wire value carries no tag, so the
    object shape is tried first and the bool second.
    """

    root: Union[PasswordlessEmail, bool, None] = None

    @field_validator("root", mode="plain")
    @classmethod
    def decode_variant(cls, value: Any) -> Union[PasswordlessEmail, bool, None]:
        if value is None:
            return None
        # first variant that validates wins
        for variant in _EMAIL_VARIANTS:
            try:
                return variant.validate_python(value)
            except PydanticValidationError:
                continue
        raise ValueError(f"expected a passwordless email object or a bool, got {type(value).__name__}: {value!r}")

    @field_serializer("root")
    def encode_variant(self, value: Union[PasswordlessEmail, bool, None], info: SerializationInfo) -> Any:
        if isinstance(value, PasswordlessEmail):
            return value.model_dump(
                mode=info.mode,
                by_alias=bool(info.by_alias),
                exclude_unset=info.exclude_unset,
                exclude_none=info.exclude_none,
            )
        return value

    def get_passwordless_email(self) -> tuple[Optional[PasswordlessEmail], bool]:
        if isinstance(self.root, PasswordlessEmail):
            return self.root, True
        return None, False

    def get_bool(self) -> tuple[Optional[bool], bool]:
        if isinstance(self.root, bool):
            return self.root, True
        return None, False

    def set_passwordless_email(self, value: PasswordlessEmail) -> None:
        self.root = value

    def set_bool(self, value: bool) -> None:
        self.root = value


class ConnectionOptionsTotp(BaseModel):
    time_step: Optional[int] = None
    length: Optional[int] = None


class ConnectionOptions(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    validation: Optional[dict[str, Any]] = None

    # "none", "low", "fair", "good" or "excellent"
    password_policy: Optional[str] = Field(default=None, alias="passwordPolicy")
    password_history: Optional[dict[str, Any]] = None
    password_no_personal_info: Optional[dict[str, Any]] = None
    password_dictionary: Optional[dict[str, Any]] = None
    password_complexity_options: Optional[dict[str, Any]] = None

    api_enable_users: Optional[bool] = None
    basic_profile: Optional[bool] = None
    ext_admin: Optional[bool] = None
    ext_is_suspended: Optional[bool] = None
    ext_agreed_terms: Optional[bool] = None
    ext_groups: Optional[bool] = None
    ext_nested_groups: Optional[bool] = None
    ext_assigned_plans: Optional[bool] = None
    ext_profile: Optional[bool] = None
    enabled_database_customization: Optional[bool] = Field(default=None, alias="enabledDatabaseCustomization")
    brute_force_protection: Optional[bool] = None
    import_mode: Optional[bool] = None
    disable_signup: Optional[bool] = None
    requires_username: Optional[bool] = None

    # extra parameters forwarded to the upstream IdP
    upstream_params: Any = None

    client_id: Optional[str] = None
    client_secret: Optional[str] = None
    tenant_domain: Optional[str] = None
    domain_aliases: Optional[list[str]] = None
    use_wsfed: Optional[bool] = None
    waad_protocol: Optional[str] = None
    waad_common_endpoint: Optional[bool] = None
    app_id: Optional[str] = None
    app_domain: Optional[str] = None
    max_groups_to_retrieve: Optional[str] = None

    # keys: "get_user", "login", "create", "verify", "change_password",
    # "delete" or "change_email"
    custom_scripts: Optional[dict[str, Any]] = Field(default=None, alias="customScripts")
    # variables available to custom scripts
    configuration: Optional[dict[str, Any]] = None

    # sms (Twilio)
    totp: Optional[ConnectionOptionsTotp] = None
    name: Optional[str] = None
    twilio_sid: Optional[str] = None
    twilio_token: Optional[str] = None
    from_: Optional[str] = Field(default=None, alias="from")
    syntax: Optional[str] = None
    template: Optional[str] = None
    messaging_service_sid: Optional[str] = None

    adfs_server: Optional[str] = None

    # salesforce-community; always sent
    community_base_url: Optional[str] = None

    # passwordless email or google-oauth2
    email: Optional[ConnectionOptionsEmail] = None

    # windowslive: 1 => Live Connect (deprecated), 2 => Azure AD personal
    # accounts; always sent
    strategy_version: Optional[int] = None

    @model_serializer(mode="wrap")
    def emit_required_keys(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        data = handler(self)
        data.setdefault("community_base_url", self.community_base_url)
        data.setdefault("strategy_version", self.strategy_version)
        return data


class Connection(BaseModel):
    # assigned by the server; leave unset when creating
    id: Optional[str] = None
    # alphanumeric and '-', starting and ending alphanumeric, max 128 chars
    name: Optional[str] = None
    # identity provider type, e.g. "auth0", "google-oauth2", "samlp", "waad"
    strategy: Optional[str] = None
    is_domain_connection: Optional[bool] = None
    options: Optional[ConnectionOptions] = None
    # client ids the connection is enabled for
    enabled_clients: Optional[list[str]] = None
    # e.g. email domains; the server defaults this to the connection name
    realms: Optional[list[str]] = None
    metadata: Any = None


class ConnectionList(ListPage):
    connections: list[Connection] = []
