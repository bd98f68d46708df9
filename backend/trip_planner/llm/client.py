import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Optional, Protocol

logger = logging.getLogger(__name__)


class TextGenerationBackend(Protocol):
    def generate_text(self, prompt: str) -> str:
        ...


class GenerationUnavailable(RuntimeError):
    pass


class GenerativeClient:
    """
    Pluggable text-generation client. Backends only turn a prompt into raw
    model text; parsing happens downstream. Each call is bounded by
    ``timeout`` seconds and a timeout raises ``TimeoutError``.
    """

    def __init__(self, backend: Optional[TextGenerationBackend], timeout: float = 30.0):
        self.backend = backend
        self.timeout = timeout

    def generate(self, prompt: str) -> str:
        if self.backend is None:
            raise GenerationUnavailable("No generative backend configured")
        pool = ThreadPoolExecutor(max_workers=1, thread_name_prefix="generate")
        try:
            future = pool.submit(self.backend.generate_text, prompt)
            return future.result(timeout=self.timeout)
        finally:
            # a hung backend call must not block the request
            pool.shutdown(wait=False)
