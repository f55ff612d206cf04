import logging

from fastapi import APIRouter, Request, Response
from fastapi.responses import JSONResponse

from app.dependencies import WebhookDep
from app.exceptions.custom import ConfigurationError, MissingFieldsError, OpenRouterError

logger = logging.getLogger(__name__)

router = APIRouter()

ALLOWED_HEADERS = {"Allow": "POST"}
ROUTE_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


@router.api_route("/", methods=ROUTE_METHODS)
@router.api_route("/api/ortto", methods=ROUTE_METHODS)
async def ortto_webhook(request: Request, service: WebhookDep) -> Response:
    service.observer.on_received(
        request.method,
        content_type=request.headers.get("content-type"),
        content_length=request.headers.get("content-length"),
        user_agent=request.headers.get("user-agent"),
    )

    if request.method in ("GET", "HEAD"):
        service.observer.on_connectivity_check(request.method)
        if request.method == "HEAD":
            return Response(status_code=200, headers=ALLOWED_HEADERS)
        return JSONResponse(content={"status": "ok"}, headers=ALLOWED_HEADERS)

    if request.method != "POST":
        return JSONResponse(
            status_code=405,
            content={"error": "Method not allowed"},
            headers=ALLOWED_HEADERS,
        )

    body = await request.body()
    try:
        result = await service.process(body)
    except (ConfigurationError, MissingFieldsError, OpenRouterError):
        raise
    except Exception as exc:
        logger.exception("Unexpected error while processing Ortto webhook")
        return JSONResponse(
            status_code=500,
            content={"error": "Unexpected error", "details": str(exc)},
        )

    return JSONResponse(content=result.model_dump(mode="json", by_alias=True))
