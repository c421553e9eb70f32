"""ghost-web: FastAPI server for inline ghost-text completion."""

from ghost.web.app import create_app
from ghost.web.config import Config

__all__ = ["Config", "create_app"]
