"""
Summarization orchestrator.

Four prompts (short, medium, long, key points) are sent to Gemini through
its OpenAI-compatible endpoint at the same time; the call returns only when
all four have settled, and fails as a whole if any one of them failed.
"""
from __future__ import annotations

import logging
import re
from concurrent.futures import ThreadPoolExecutor, wait
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from openai import OpenAI

from docscan.errors import ConfigurationError, GenerationError
from docscan.settings import Settings

logger = logging.getLogger(__name__)

TRUNCATION_MARKER = "..."

PROMPT_TEMPLATES: Dict[str, str] = {
    "short": "Summarize the following text in 2-3 sentences:\n\n{text}",
    "medium": "Summarize the following text in 1 paragraph (4-6 sentences):\n\n{text}",
    "long": "Summarize the following text in 2-3 paragraphs:\n\n{text}",
    "key_points": "Extract 5-7 key points as a bullet list:\n\n{text}",
}

_BULLET_RE = re.compile(r"^[-*•]\s*")


@dataclass
class SummarySet:
    short: str
    medium: str
    long: str

    def to_dict(self) -> Dict[str, str]:
        return {"short": self.short, "medium": self.medium, "long": self.long}


@dataclass
class SummaryResult:
    summaries: SummarySet
    key_points: List[str] = field(default_factory=list)


def truncate_text(text: str, limit: int = 8000) -> str:
    if len(text) > limit:
        return text[:limit] + TRUNCATION_MARKER
    return text


def build_prompts(text: str) -> Dict[str, str]:
    return {name: tmpl.format(text=text) for name, tmpl in PROMPT_TEMPLATES.items()}


def parse_key_points(raw: str) -> List[str]:
    points = []
    for line in (raw or "").splitlines():
        point = _BULLET_RE.sub("", line.strip()).strip()
        if point:
            points.append(point)
    return points


class GenerationClient:
    """Thin wrapper over the OpenAI SDK pointed at Gemini."""

    def __init__(self, api_key: str, model: str, base_url: Optional[str] = None, timeout: int = 60):
        self.model = model
        self._client = OpenAI(api_key=api_key, base_url=base_url or None, timeout=timeout)

    def generate(self, prompt: str) -> str:
        res = self._client.chat.completions.create(
            model=self.model,
            messages=[{"role": "user", "content": prompt}],
        )
        text = (res.choices[0].message.content or "").strip()
        if not text:
            raise GenerationError("Model returned an empty response")
        return text


class Summarizer:
    def __init__(self, settings: Settings, client: Optional[GenerationClient] = None):
        self.settings = settings
        self._client = client

    @property
    def client(self) -> GenerationClient:
        if self._client is None:
            s = self.settings
            self._client = GenerationClient(
                s.gemini_api_key, s.gemini_model, s.gemini_base_url, s.generation_timeout
            )
        return self._client

    def summarize(self, text: str) -> SummaryResult:
        if not self.settings.gemini_configured:
            raise ConfigurationError("Gemini API key missing")

        prompts = build_prompts(truncate_text(text, self.settings.summary_char_limit))
        client = self.client

        with ThreadPoolExecutor(max_workers=len(prompts), thread_name_prefix="summarize") as pool:
            futures = {name: pool.submit(client.generate, prompt) for name, prompt in prompts.items()}
            wait(futures.values())

        outputs: Dict[str, str] = {}
        for name, fut in futures.items():
            err = fut.exception()
            if err is not None:
                logger.warning("Generation for %s summary failed: %s", name, err)
                if isinstance(err, GenerationError):
                    raise err
                raise GenerationError(f"Summary generation failed: {type(err).__name__}: {err}") from err
            outputs[name] = fut.result()

        return SummaryResult(
            summaries=SummarySet(
                short=outputs["short"],
                medium=outputs["medium"],
                long=outputs["long"],
            ),
            key_points=parse_key_points(outputs["key_points"]),
        )
