from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List

import requests

from trip_planner.llm.prompts import PLANNER_SYSTEM_PROMPT

logger = logging.getLogger(__name__)


@dataclass
class OllamaBackend:
    """
    Text generation through Ollama's chat API.
    Returns the raw message content; the caller extracts the JSON.
    """

    host: str
    model: str
    timeout: float = 30.0

    def _build_messages(self, prompt: str) -> List[dict]:
        return [
            {"role": "system", "content": PLANNER_SYSTEM_PROMPT},
            {"role": "user", "content": prompt},
        ]

    def generate_text(self, prompt: str) -> str:
        payload = {"model": self.model, "messages": self._build_messages(prompt), "stream": False}
        try:
            resp = requests.post(f"{self.host}/api/chat", json=payload, timeout=self.timeout)
            resp.raise_for_status()
        except Exception as exc:  # noqa: BLE001
            logger.error("Ollama request failed: %s", exc)
            raise

        return resp.json().get("message", {}).get("content", "")
