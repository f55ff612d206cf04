import httpx

from app.schemas.ortto import MergeResult, OrttoMergeRequest, OrttoPerson
from app.schemas.webhook import COUNTRY_NAME_FIELD, EMAIL_FIELD, SECONDARY_EMAIL_FIELD

MERGE_URL = "https://api.eu.ap3api.com/v1/person/merge"


class OrttoService:
    def __init__(
        self,
        client: httpx.AsyncClient,
        api_key: str,
        update_url: str = "",
        timeout: float | None = None,
    ):
        self._client = client
        self._headers = {
            "X-Api-Key": api_key,
            "Content-Type": "application/json",
        }
        self._api_key = api_key
        self._update_url = update_url
        self._timeout = timeout

    @property
    def configured(self) -> bool:
        return bool(self._api_key and self._update_url)

    @staticmethod
    def build_merge_request(
        contact_id: str, country_name: str, email: str | None = None
    ) -> OrttoMergeRequest:
        fields = {COUNTRY_NAME_FIELD: country_name}
        if email:
            fields[EMAIL_FIELD] = email
            fields[SECONDARY_EMAIL_FIELD] = email
        return OrttoMergeRequest(
            people=[OrttoPerson(person_id=contact_id, fields=fields)]
        )

    async def update_contact(
        self, contact_id: str, country_name: str, email: str | None = None
    ) -> MergeResult:
        """Write the country name to the Ortto person.

        Failures are returned in the result, never raised.
        """
        if not self.configured:
            return MergeResult(success=False, skipped=True)

        payload = self.build_merge_request(contact_id, country_name, email)
        kwargs: dict = {}
        if self._timeout is not None:
            kwargs["timeout"] = self._timeout

        try:
            resp = await self._client.post(
                self._update_url,
                json=payload.model_dump(),
                headers=self._headers,
                **kwargs,
            )
        except httpx.HTTPError as exc:
            return MergeResult(success=False, error=str(exc) or type(exc).__name__)

        if resp.status_code >= 400:
            return MergeResult(
                success=False,
                status_code=resp.status_code,
                body=resp.text,
                error=f"Ortto update failed ({resp.status_code})",
            )

        return MergeResult(success=True, status_code=resp.status_code, body=resp.text)
