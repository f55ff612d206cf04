from collections.abc import Mapping

from app.exceptions.custom import MissingFieldsError, OpenRouterError
from app.mappers.body_decoder import decode_body
from app.mappers.field_resolver import FieldResolver
from app.mappers.request_validator import RequestValidator
from app.observers import WebhookLogObserver
from app.schemas.ortto import MergeResult
from app.schemas.responses import CountryLookupResponse, StatusResponse, WebhookResponse
from app.services.openrouter import OpenRouterService
from app.services.ortto import OrttoService


class CountryWebhookService:
    """Decode, validate, resolve the country name, then update Ortto."""

    def __init__(
        self,
        openrouter: OpenRouterService,
        ortto: OrttoService,
        resolver: FieldResolver | None = None,
        validator: RequestValidator | None = None,
        observer: WebhookLogObserver | None = None,
    ):
        self._openrouter = openrouter
        self._ortto = ortto
        self._resolver = resolver or FieldResolver()
        self._validator = validator or RequestValidator()
        self.observer = observer or WebhookLogObserver()

    async def process(
        self, raw_body: bytes | str | Mapping | None
    ) -> WebhookResponse:
        decoded = decode_body(raw_body)
        self.observer.on_decoded(decoded)
        if decoded.is_benign_test:
            return StatusResponse()

        fields = self._resolver.extract_fields(decoded.payload)
        if self._validator.is_empty_test(fields):
            self.observer.on_empty_test()
            return StatusResponse()

        try:
            fields = self._validator.validate(fields)
        except MissingFieldsError as exc:
            self.observer.on_validation_failure(exc.missing, fields)
            raise

        # Validation may allow a prompt-only or contact-only request through
        # when country code is not required; there is nothing to resolve then.
        if not fields.country_code:
            return StatusResponse()

        self.observer.on_llm_call(self._openrouter.model, fields.country_code)
        try:
            country_name = await self._openrouter.resolve_country_name(
                fields.country_code, fields.prompt
            )
        except OpenRouterError as exc:
            self.observer.on_llm_failure(exc)
            raise
        self.observer.on_llm_result(country_name)

        ortto_update: MergeResult | None = None
        if fields.contact_id:
            if self._ortto.configured:
                self.observer.on_merge_call(fields.contact_id)
            ortto_update = await self._ortto.update_contact(
                fields.contact_id, country_name, email=fields.email
            )
            self.observer.on_merge_result(fields.contact_id, ortto_update)

        return CountryLookupResponse(
            country_name=country_name,
            contact_id=fields.contact_id,
            ortto_update=ortto_update,
        )
