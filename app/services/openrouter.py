import httpx

from app.exceptions.custom import ConfigurationError, OpenRouterError
from app.schemas.openrouter import ChatCompletionRequest, ChatMessage

API_URL = "https://openrouter.ai/api/v1/chat/completions"
DEFAULT_MODEL = "openai/gpt-4o-mini"

DEFAULT_SYSTEM_PROMPT = (
    "You receive a country code. Interpret the country code and "
    "return only the final country name."
)


class OpenRouterService:
    def __init__(
        self,
        client: httpx.AsyncClient,
        api_key: str,
        model: str = DEFAULT_MODEL,
        timeout: float | None = None,
    ):
        self._client = client
        self._api_key = api_key
        self.model = model or DEFAULT_MODEL
        self._timeout = timeout

    def build_request(
        self, country_code: str, prompt: str | None = None
    ) -> ChatCompletionRequest:
        return ChatCompletionRequest(
            model=self.model,
            messages=[
                ChatMessage(role="system", content=prompt or DEFAULT_SYSTEM_PROMPT),
                ChatMessage(role="user", content=f"Country code: {country_code}"),
            ],
        )

    async def resolve_country_name(
        self, country_code: str, prompt: str | None = None
    ) -> str:
        """Ask the model for the country name behind ``country_code``."""
        if not self._api_key:
            raise ConfigurationError("OPENROUTER_API_KEY is not configured")

        request = self.build_request(country_code, prompt)
        kwargs: dict = {}
        if self._timeout is not None:
            kwargs["timeout"] = self._timeout

        try:
            resp = await self._client.post(
                API_URL,
                json=request.model_dump(),
                headers={
                    "Authorization": f"Bearer {self._api_key}",
                    "Content-Type": "application/json",
                },
                **kwargs,
            )
        except httpx.HTTPError as exc:
            raise OpenRouterError(
                "OpenRouter request failed", details=str(exc) or type(exc).__name__
            ) from exc

        if resp.status_code >= 400:
            raise OpenRouterError(
                "OpenRouter request failed",
                status_code=resp.status_code,
                details=resp.text,
            )

        return self._extract_content(resp)

    @staticmethod
    def _extract_content(resp: httpx.Response) -> str:
        try:
            content = resp.json()["choices"][0]["message"]["content"]
        except (ValueError, KeyError, IndexError, TypeError):
            content = None

        if not isinstance(content, str) or not content.strip():
            raise OpenRouterError("OpenRouter returned no content")
        return content.strip()
