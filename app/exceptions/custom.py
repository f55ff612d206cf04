class ConfigurationError(Exception):
    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class MissingFieldsError(Exception):
    def __init__(self, required: list[str], missing: list[str]):
        self.message = "Missing required fields"
        self.required = required
        self.missing = missing
        super().__init__(f"{self.message}: {', '.join(missing)}")


class OpenRouterError(Exception):
    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        details: str | None = None,
    ):
        self.message = message
        self.status_code = status_code
        self.details = details
        super().__init__(message)
