"""HTTP server binding and CORS configuration."""

import os

from ..utils.env import env_flag, env_list


HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "2500"))
CORS_ALLOW_ORIGINS = env_list("CORS_ALLOW_ORIGINS", "http://localhost:3000")
CORS_ALLOW_CREDENTIALS = env_flag("CORS_ALLOW_CREDENTIALS", False)

__all__ = [
    "HOST",
    "PORT",
    "CORS_ALLOW_ORIGINS",
    "CORS_ALLOW_CREDENTIALS",
]
