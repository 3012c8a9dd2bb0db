"""Single-shot local HTTP listener that receives the KubeSail callback."""
import logging
from pathlib import Path
from typing import Callable, Optional

import uvicorn

from .api.main import create_app
from .config import Config
from .errors import ConfigWriteFailed
from .merge import entry_name, merge
from .models import ConfigDocument
from .payload import CredentialPayload
from .store import ConfigStore
from .utils import bind_socket

logger = logging.getLogger(__name__)


class CallbackSession:
    """State of one registration attempt.

    The session completes at most once: on the first valid payload it merges,
    saves and signals ``on_done``. A failed save also completes it, with the
    error kept in ``error``.
    """

    def __init__(self, store: ConfigStore, document: ConfigDocument,
                 on_done: Optional[Callable[[], None]] = None):
        self.store = store
        self.document = document
        self.on_done = on_done
        self.completed = False
        self.context_name: Optional[str] = None
        self.saved_path: Optional[Path] = None
        self.error: Optional[ConfigWriteFailed] = None

    def complete(self, payload: CredentialPayload) -> str:
        """Merge ``payload`` into the document and persist it.

        Returns:
            The name of the context that was written

        Raises:
            ConfigWriteFailed: If the kubeconfig cannot be saved
        """
        merged = merge(self.document, payload)
        try:
            self.saved_path = self.store.save(merged)
        except ConfigWriteFailed as e:
            logger.error(f"❌ {e}")
            self.error = e
            raise
        else:
            self.document = merged
            self.context_name = entry_name(payload.username)
            logger.info(f"✅ Stored credentials for {self.context_name}")
            return self.context_name
        finally:
            self.completed = True
            if self.on_done:
                self.on_done()


class CallbackListener:
    """Serves the callback application until one callback has been handled."""

    def __init__(self, store: ConfigStore, document: ConfigDocument,
                 host: Optional[str] = None, port: int = 0, debug: bool = False,
                 www_host: Optional[str] = None):
        self.host = host or Config.CALLBACK_HOST
        self.www_host = www_host
        self.socket = bind_socket(self.host, port)
        self.port = self.socket.getsockname()[1]
        self.session = CallbackSession(store, document, on_done=self.shutdown)
        self.app = create_app(self.session)
        self.server = uvicorn.Server(uvicorn.Config(
            self.app,
            log_level="debug" if debug else "warning",
            access_log=debug,
        ))

    @property
    def registration_url(self) -> str:
        return Config.registration_url(self.port, self.www_host)

    def shutdown(self) -> None:
        """Ask the server to stop once the current response is sent."""
        self.server.should_exit = True

    def serve(self) -> Optional[str]:
        """Block until a callback completes the session or the server is stopped.

        Returns:
            The configured context name, or None if stopped before a valid callback

        Raises:
            ConfigWriteFailed: If the merged kubeconfig could not be saved
        """
        logger.debug(f"Listening for the callback on http://{self.host}:{self.port}/")
        try:
            self.server.run(sockets=[self.socket])
        finally:
            self.socket.close()

        if self.session.error:
            raise self.session.error
        return self.session.context_name
