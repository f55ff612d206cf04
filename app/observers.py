import logging

from app.mappers.body_decoder import DecodedBody
from app.schemas.ortto import MergeResult
from app.schemas.webhook import ResolvedFields

logger = logging.getLogger("app.webhook")


class WebhookLogObserver:
    """Logs the webhook lifecycle at fixed points of the request flow."""

    def __init__(self, log: logging.Logger | None = None):
        self._log = log or logger

    def on_received(
        self,
        method: str,
        content_type: str | None = None,
        content_length: str | None = None,
        user_agent: str | None = None,
    ) -> None:
        self._log.info(
            "Ortto webhook received: method=%s content_type=%s content_length=%s user_agent=%s",
            method, content_type, content_length, user_agent,
        )

    def on_connectivity_check(self, method: str) -> None:
        self._log.info("Connection test request received (%s)", method)

    def on_decoded(self, decoded: DecodedBody) -> None:
        if decoded.payload is None:
            self._log.warning("Missing or invalid body (%s)", decoded.status)
            return
        self._log.info("Ortto payload keys: %s", sorted(str(key) for key in decoded.payload))

    def on_empty_test(self) -> None:
        self._log.info("Test POST detected (no fields). Returning 200.")

    def on_validation_failure(self, missing: list[str], fields: ResolvedFields) -> None:
        self._log.warning(
            "Missing required fields: %s (contact_id present=%s)",
            missing, fields.contact_id is not None,
        )

    def on_llm_call(self, model: str, country_code: str) -> None:
        self._log.info("Calling OpenRouter: model=%s country_code=%s", model, country_code)

    def on_llm_result(self, country_name: str) -> None:
        self._log.info("OpenRouter resolved country name: %s", country_name)

    def on_llm_failure(self, exc: Exception) -> None:
        self._log.error("OpenRouter call failed: %s", exc)

    def on_merge_call(self, contact_id: str) -> None:
        self._log.info("Updating Ortto contact %s", contact_id)

    def on_merge_result(self, contact_id: str, result: MergeResult) -> None:
        if result.skipped:
            self._log.info(
                "Ortto update skipped (missing ORTTO_UPDATE_URL or ORTTO_API_KEY)"
            )
        elif result.success:
            self._log.info("Ortto contact %s updated (status=%s)", contact_id, result.status_code)
        else:
            self._log.error(
                "Ortto update failed for %s: status=%s error=%s body=%s",
                contact_id, result.status_code, result.error, result.body,
            )
