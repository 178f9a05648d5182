"""Error kinds raised by gateways and services and mapped to JSON responses in main."""


class ConfigurationError(ValueError):
    """Raised when a required environment variable is missing"""


class CollaboratorError(Exception):
    """Exception raised when an external service call fails"""
    def __init__(self, component: str, message: str, status_code: int = None):
        self.component = component
        self.status_code = status_code
        self.message = f"{component}: {message}"
        super().__init__(self.message)


class MalformedGenerationOutput(CollaboratorError):
    """The text-generation service returned something that is not the expected JSON"""
    def __init__(self, message: str):
        super().__init__("Gemini", message)
        self.message = f"AI Generation Failed: {message}"
        self.args = (self.message,)


class AnalysisError(Exception):
    """Keyword analysis finished without any usable keyword"""
    def __init__(self, message: str = None):
        self.message = message or "AI analysis returned no results."
        super().__init__(self.message)
