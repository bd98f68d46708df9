from __future__ import annotations

import logging

import vertexai
from vertexai.generative_models import GenerativeModel

logger = logging.getLogger(__name__)


class VertexBackend:
    """Gemini on Vertex AI. The SDK picks up application default credentials."""

    def __init__(self, project: str, location: str, model: str):
        vertexai.init(project=project, location=location)
        self.model_name = model
        self.model = GenerativeModel(model)
        logger.info("Vertex backend ready: project=%s location=%s model=%s", project, location, model)

    def generate_text(self, prompt: str) -> str:
        response = self.model.generate_content(prompt)
        return response.candidates[0].content.parts[0].text or ""
