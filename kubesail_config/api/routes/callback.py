import logging

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse, PlainTextResponse

from kubesail_config.errors import ConfigWriteFailed, PayloadError
from kubesail_config.payload import parse_callback

logger = logging.getLogger(__name__)

router = APIRouter()

CONFIGURED_HTML = """<!DOCTYPE html>
<html>
  <head>
    <title>Kubesail Config Complete</title>
    <link href="https://fonts.googleapis.com/css?family=IBM+Plex+Sans" rel="stylesheet">
    <style>
      html { height: 100%; }
      body {
        color: #131518;
        font-family: 'IBM Plex Sans', sans-serif;
        display: flex;
        align-items: center;
        justify-content: center;
        flex-direction: column;
        height: 100%;
      }
      h2 {
        font-weight: normal;
        text-transform: uppercase;
        font-size: 2.2rem;
      }
      p { margin-top: 3rem; }
    </style>
  </head>
  <body>
    <h2>Kubesail is now configured</h2>
    <p>You can close this window and return to your terminal</p>
  </body>
</html>
"""


@router.get("/{path:path}")
async def receive_callback(request: Request, path: str):
    session = request.app.state.session
    if session.completed:
        return PlainTextResponse("Kubesail is already configured", status_code=410)

    try:
        payload = parse_callback(request.url.query)
    except PayloadError as e:
        logger.warning(f"⚠️  Rejected callback on /{path}: {e}")
        return PlainTextResponse(str(e), status_code=400)

    try:
        session.complete(payload)
    except ConfigWriteFailed as e:
        return PlainTextResponse(f"Failed to save Kubernetes config: {e.reason}", status_code=500)

    return HTMLResponse(CONFIGURED_HTML)
