from fastapi import FastAPI
from kubesail_config.api.routes import callback


def create_app(session) -> FastAPI:
    """Build the single-shot callback application around ``session``."""
    app = FastAPI(docs_url=None, redoc_url=None, openapi_url=None)
    app.state.session = session
    app.include_router(callback.router)
    return app
