from app.exceptions.custom import MissingFieldsError
from app.schemas.webhook import (
    CONTACT_ID_FIELD,
    COUNTRY_CODE_FIELD,
    PROMPT_FIELD,
    RequiredFieldsPolicy,
    ResolvedFields,
)


class RequestValidator:
    def __init__(self, policy: RequiredFieldsPolicy | None = None):
        self.policy = policy or RequiredFieldsPolicy()

    @staticmethod
    def is_empty_test(fields: ResolvedFields) -> bool:
        """Ortto probes the endpoint with POSTs that carry no fields at all."""
        return not fields.has_signal()

    def missing(self, fields: ResolvedFields) -> list[str]:
        checks = (
            (self.policy.require_country_code, fields.country_code, COUNTRY_CODE_FIELD),
            (self.policy.require_prompt, fields.prompt, PROMPT_FIELD),
            (self.policy.require_contact_id, fields.contact_id, CONTACT_ID_FIELD),
        )
        return [name for required, value, name in checks if required and not value]

    def validate(self, fields: ResolvedFields) -> ResolvedFields:
        missing = self.missing(fields)
        if missing:
            raise MissingFieldsError(required=self.policy.required(), missing=missing)
        return fields
