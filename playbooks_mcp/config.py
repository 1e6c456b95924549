"""
Configuration management for the ClickUp Playbooks MCP Server
Environment-based configuration, read once at import
"""

import os

from . import __version__

class Config:
    """Server configuration with environment variable support"""

    # Server metadata
    SERVER_NAME: str = os.getenv("MCP_SERVER_NAME", "clickup-playbooks")
    SERVER_VERSION: str = os.getenv("MCP_SERVER_VERSION", __version__)

    # Environment
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")
    DEBUG: bool = os.getenv("DEBUG", "false").lower() == "true"

    # ClickUp access
    API_TOKEN: str = os.getenv("CLICKUP_API_TOKEN", "")
    WORKSPACE_ID: str = os.getenv("CLICKUP_WORKSPACE_ID", "2285500")
    SPACE_ID: str = os.getenv("CLICKUP_SPACE_ID", "")
    PLAYBOOKS_FOLDER_ID: str = os.getenv("CLICKUP_PLAYBOOKS_FOLDER_ID", "98107928")

    API_URL: str = os.getenv("CLICKUP_API_URL", "https://api.clickup.com/api/v2")
    APP_URL: str = os.getenv("CLICKUP_APP_URL", "https://app.clickup.com")
    REQUEST_TIMEOUT: str = os.getenv("CLICKUP_REQUEST_TIMEOUT", "30")

    # Output
    PREVIEW_LENGTH: int = int(os.getenv("PREVIEW_LENGTH", "150"))

    # Features
    ENABLE_LOGGING: bool = os.getenv("ENABLE_LOGGING", "true").lower() == "true"

    @classmethod
    def request_timeout(cls) -> float:
        """Request timeout in seconds"""
        return float(cls.REQUEST_TIMEOUT)

    @classmethod
    def validate(cls) -> bool:
        """Validate configuration"""
        errors = []

        if not cls.API_TOKEN:
            errors.append("CLICKUP_API_TOKEN environment variable is required")

        if not cls.PLAYBOOKS_FOLDER_ID:
            errors.append("CLICKUP_PLAYBOOKS_FOLDER_ID cannot be empty")

        try:
            if cls.request_timeout() <= 0:
                errors.append(f"Request timeout must be positive: {cls.REQUEST_TIMEOUT}")
        except ValueError:
            errors.append(f"Request timeout is not a number: {cls.REQUEST_TIMEOUT}")

        if errors:
            raise ValueError(f"Configuration errors:\n" + "\n".join(f"  - {e}" for e in errors))

        return True

    @classmethod
    def masked_token(cls) -> str:
        """API token safe for display"""
        if not cls.API_TOKEN:
            return "Missing"
        return f"Present ({cls.API_TOKEN[:4]}…)"

    @classmethod
    def display(cls) -> str:
        """Display configuration (for debugging)"""
        return f"""
ClickUp Playbooks MCP Server Configuration
==========================================
Server: {cls.SERVER_NAME} v{cls.SERVER_VERSION}
Environment: {cls.ENVIRONMENT}
Debug: {cls.DEBUG}

ClickUp:
  API: {cls.API_URL}
  Token: {cls.masked_token()}
  Workspace ID: {cls.WORKSPACE_ID}
  Space ID: {cls.SPACE_ID or 'any'}
  Playbooks folder ID: {cls.PLAYBOOKS_FOLDER_ID}
  Request timeout: {cls.REQUEST_TIMEOUT}s

Features:
  Logging: {cls.ENABLE_LOGGING}
  Preview length: {cls.PREVIEW_LENGTH} chars
==========================================
"""
