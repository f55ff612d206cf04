from pydantic import BaseModel


class ChatMessage(BaseModel):
    role: str  # "system" | "user"
    content: str


class ChatCompletionRequest(BaseModel):
    model: str
    messages: list[ChatMessage]
