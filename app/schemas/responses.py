from pydantic import BaseModel, Field

from app.schemas.ortto import MergeResult
from app.schemas.webhook import COUNTRY_NAME_FIELD


class StatusResponse(BaseModel):
    status: str = "ok"


class CountryLookupResponse(BaseModel):
    model_config = {"populate_by_name": True}

    country_name: str = Field(alias=COUNTRY_NAME_FIELD)
    contact_id: str | None = None
    ortto_update: MergeResult | None = None


WebhookResponse = StatusResponse | CountryLookupResponse
