from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from jalanma.core.settings import get_settings


def add_cors_middleware(app: FastAPI) -> None:
    """Allow the browser client (list/map/form tabs) to call the RPC surface."""
    origins = get_settings().cors_origins_list

    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        # Browsers reject credentials together with a wildcard origin.
        allow_credentials=origins != ["*"],
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )
