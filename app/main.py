import logging
import sys
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.config import Settings
from app.exceptions.custom import ConfigurationError, MissingFieldsError, OpenRouterError
from app.exceptions.handlers import (
    configuration_error_handler,
    http_error_handler,
    missing_fields_error_handler,
    openrouter_error_handler,
)
from app.mappers.field_resolver import FieldResolver
from app.mappers.request_validator import RequestValidator
from app.observers import WebhookLogObserver
from app.routers.webhook import router as webhook_router
from app.services.country_webhook import CountryWebhookService
from app.services.openrouter import OpenRouterService
from app.services.ortto import OrttoService


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = Settings()

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stdout,
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)

    async with httpx.AsyncClient(timeout=settings.request_timeout) as client:
        openrouter = OpenRouterService(
            client,
            settings.openrouter_api_key,
            model=settings.openrouter_model,
            timeout=settings.request_timeout,
        )
        ortto = OrttoService(
            client,
            settings.ortto_api_key,
            update_url=settings.ortto_update_url,
            timeout=settings.request_timeout,
        )

        app.state.webhook_service = CountryWebhookService(
            openrouter,
            ortto,
            resolver=FieldResolver(),
            validator=RequestValidator(settings.required_fields_policy()),
            observer=WebhookLogObserver(),
        )

        yield


app = FastAPI(title="Ortto Country Webhook", lifespan=lifespan)

app.add_exception_handler(ConfigurationError, configuration_error_handler)
app.add_exception_handler(MissingFieldsError, missing_fields_error_handler)
app.add_exception_handler(OpenRouterError, openrouter_error_handler)
app.add_exception_handler(StarletteHTTPException, http_error_handler)

app.include_router(webhook_router)
