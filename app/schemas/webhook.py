from pydantic import BaseModel

COUNTRY_CODE_FIELD = "str:cm:country-of-residence-code"
PROMPT_FIELD = "str:cm:prompt"
COUNTRY_NAME_FIELD = "str:cm:country-of-residence"
CONTACT_ID_FIELD = "contact_id"
EMAIL_FIELD = "str::email"
SECONDARY_EMAIL_FIELD = "str:cm:email-secondary"


class FieldAliases(BaseModel):
    """Payload keys probed for each logical field, highest priority first."""

    model_config = {"frozen": True}

    country_code: tuple[str, ...] = (
        COUNTRY_CODE_FIELD,
        "country_of_residence_code",
        "country_code",
        "country",
    )
    prompt: tuple[str, ...] = (PROMPT_FIELD, "prompt")
    contact_id: tuple[str, ...] = (CONTACT_ID_FIELD, "contactId", "str:cm:contact-id")
    email: tuple[str, ...] = ("email", SECONDARY_EMAIL_FIELD, EMAIL_FIELD)


class RequiredFieldsPolicy(BaseModel):
    model_config = {"frozen": True}

    require_country_code: bool = True
    require_prompt: bool = False
    require_contact_id: bool = False

    def required(self) -> list[str]:
        fields: list[str] = []
        if self.require_country_code:
            fields.append(COUNTRY_CODE_FIELD)
        if self.require_prompt:
            fields.append(PROMPT_FIELD)
        if self.require_contact_id:
            fields.append(CONTACT_ID_FIELD)
        return fields


class ResolvedFields(BaseModel):
    country_code: str | None = None
    prompt: str | None = None
    contact_id: str | None = None
    email: str | None = None

    def has_signal(self) -> bool:
        return bool(self.country_code or self.prompt or self.contact_id)
