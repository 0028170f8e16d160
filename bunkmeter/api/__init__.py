from bunkmeter.api.responses import APIResponse
from bunkmeter.api.routes import router

__all__ = ["APIResponse", "router"]
