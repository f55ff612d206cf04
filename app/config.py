from pydantic import Field
from pydantic_settings import BaseSettings

from app.schemas.webhook import RequiredFieldsPolicy
from app.services.ortto import MERGE_URL


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    openrouter_api_key: str = ""
    openrouter_model: str = "openai/gpt-4o-mini"
    ortto_api_key: str = ""
    ortto_update_url: str = Field(
        default="",
        description="Ortto person merge endpoint; leave empty to skip the update",
        examples=[MERGE_URL],
    )
    request_timeout: float = 30.0
    log_level: str = "INFO"
    require_country_code: bool = True
    require_prompt: bool = False
    require_contact_id: bool = False

    def required_fields_policy(self) -> RequiredFieldsPolicy:
        return RequiredFieldsPolicy(
            require_country_code=self.require_country_code,
            require_prompt=self.require_prompt,
            require_contact_id=self.require_contact_id,
        )
