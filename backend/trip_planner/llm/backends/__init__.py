import logging
from typing import Optional

from trip_planner.core.config import Settings
from trip_planner.llm.client import TextGenerationBackend

logger = logging.getLogger(__name__)


def build_backend(settings: Settings) -> Optional[TextGenerationBackend]:
    provider = settings.llm_provider.lower()
    if provider == "ollama":
        from trip_planner.llm.backends.ollama_backend import OllamaBackend

        return OllamaBackend(
            host=settings.ollama_host,
            model=settings.ollama_model,
            timeout=settings.generation_timeout_seconds,
        )
    if provider == "vertex":
        if not settings.vertex_project_id:
            logger.warning("VERTEX_PROJECT_ID not set; itineraries will use the fallback template")
            return None
        from trip_planner.llm.backends.vertex_backend import VertexBackend

        try:
            return VertexBackend(
                project=settings.vertex_project_id,
                location=settings.vertex_location,
                model=settings.vertex_model,
            )
        except Exception as exc:  # noqa: BLE001
            logger.warning("Vertex AI initialisation failed, fallback only: %s", exc)
            return None
    logger.info("LLM provider %r disabled; itineraries will use the fallback template", provider)
    return None
