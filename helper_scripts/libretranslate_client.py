"""
LibreTranslate access for filling gaps in the field-name tables.

Only two endpoints are used: /languages, to pick a target language the server
knows, and /translate, called once per locale with every missing label.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Sequence

import requests


LOG = logging.getLogger("libretranslate_client")

# Raised by a single /translate exchange; anything here is worth a retry
RETRYABLE = (requests.RequestException, RuntimeError, ValueError, KeyError, TypeError)


@dataclass
class LibreTranslateClient:
    base_url: str = "http://localhost:5000"
    timeout: int = 30
    attempts: int = 4
    first_delay: float = 0.5
    session: requests.Session = field(default_factory=requests.Session)
    _codes: Optional[List[str]] = field(default=None, init=False)

    def _endpoint(self, name: str) -> str:
        return f"{self.base_url.rstrip('/')}/{name}"

    def get_supported_codes(self) -> List[str]:
        """Language codes the server can translate into, fetched once."""
        if self._codes is None:
            resp = self.session.get(self._endpoint("languages"), timeout=self.timeout)
            resp.raise_for_status()
            self._codes = sorted(entry["code"] for entry in resp.json())
            LOG.info("Server offers %d target languages", len(self._codes))
        return self._codes

    def translate_batch(
        self,
        texts: Sequence[str],
        source_lang: str,
        target_lang: str,
    ) -> List[str]:
        """Translate labels in one request, retrying with a doubling delay."""
        if not texts:
            return []

        form = {"q": list(texts), "source": source_lang, "target": target_lang, "format": "text"}
        failure: Optional[Exception] = None
        for attempt, delay in enumerate(self._delays(), start=1):
            try:
                return self._translate_once(form, len(texts))
            except RETRYABLE as exc:
                failure = exc
                LOG.warning(
                    "%s labels: attempt %d/%d failed (%s)", target_lang, attempt, self.attempts, exc
                )
                time.sleep(delay)

        raise RuntimeError(
            f"Could not translate {len(texts)} labels into {target_lang}"
        ) from failure

    def _delays(self) -> Iterator[float]:
        delay = self.first_delay
        for _ in range(self.attempts):
            yield delay
            delay *= 2.0

    def _translate_once(self, form: dict, expected: int) -> List[str]:
        resp = self.session.post(self._endpoint("translate"), data=form, timeout=self.timeout)
        if resp.status_code >= 500:
            raise RuntimeError(f"server answered {resp.status_code}")
        resp.raise_for_status()

        body = resp.json()
        if isinstance(body, list):
            labels = [item["translatedText"] for item in body]
        elif isinstance(body, dict) and isinstance(body.get("translatedText"), list):
            labels = list(body["translatedText"])
        elif isinstance(body, dict) and "translatedText" in body:
            labels = [body["translatedText"]]
        else:
            raise RuntimeError(f"unexpected reply: {str(body)[:200]}")

        if len(labels) != expected:
            raise RuntimeError(f"asked for {expected} labels, got {len(labels)}")
        return labels
