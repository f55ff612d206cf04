from typing import Annotated

from fastapi import Depends, Request

from app.services.country_webhook import CountryWebhookService


def get_webhook_service(request: Request) -> CountryWebhookService:
    return request.app.state.webhook_service


WebhookDep = Annotated[CountryWebhookService, Depends(get_webhook_service)]
