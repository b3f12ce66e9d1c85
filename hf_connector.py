# hf_connector.py
"""
Connector for the two Hugging Face inference endpoints used by /jawab.

Exports:
  - HFConnector.translate(text)            -> translated question (str)
  - HFConnector.ask_table(table, query)    -> AnswerResult

Notes:
 - One connector is built at startup and shared read-only by all requests.
 - Both endpoints use the same bearer token.
 - No retries: a failed call raises and the request ends with success=false.
"""

import json
import logging
from typing import Any, Optional

import requests

from config import Settings
from models import AnswerResult, Table, TranslationError, UpstreamError

LOG = logging.getLogger(__name__)


class HFConnector:
    def __init__(self, settings: Settings, session: Optional[requests.Session] = None):
        self.settings = settings
        self.session = session or requests.Session()

    def _headers(self) -> dict:
        return {
            "Authorization": f"Bearer {self.settings.token}",
            "Content-Type": "application/json",
        }

    def _post(self, url: str, payload: Any) -> requests.Response:
        return self.session.post(
            url,
            json=payload,
            headers=self._headers(),
            timeout=self.settings.request_timeout,
        )

    def translate(self, text: str) -> str:
        """
        Send `text` to the translation endpoint, return translation_text of the first result.
        Raises TranslationError on transport errors, non-2xx status or unexpected body shape.
        """
        try:
            with self._post(self.settings.translation_url, {"inputs": text}) as resp:
                status = resp.status_code
                body = resp.text
        except requests.RequestException as e:
            raise TranslationError(f"translation request failed: {e}")

        LOG.debug("raw translation response (%s): %s", status, body)

        try:
            result = json.loads(body)
        except ValueError:
            result = None

        if not 200 <= status < 300:
            # inference API errors look like {"error": "..."}
            detail = result.get("error") if isinstance(result, dict) else None
            if detail is None:
                detail = body[:400]
            raise TranslationError(f"translation endpoint returned {status}: {detail}")

        if not isinstance(result, list):
            raise TranslationError(f"unexpected translation response: {body[:400]}")
        if not result:
            raise TranslationError("no translation found in response")

        first = result[0]
        translated = first.get("translation_text") if isinstance(first, dict) else None
        if not isinstance(translated, str):
            raise TranslationError(f"translation_text missing in response: {body[:400]}")
        return translated

    def ask_table(self, table: Table, query: str) -> AnswerResult:
        """
        Ask the table-QA endpoint `query` over `table`.
        Raises UpstreamError (with status code and body when available) on any failure.
        """
        payload = {"table": table, "query": query}
        try:
            with self._post(self.settings.table_qa_url, payload) as resp:
                status = resp.status_code
                body = resp.text
        except requests.RequestException as e:
            raise UpstreamError(f"table-qa request failed: {e}")

        if status != 200:
            raise UpstreamError("table-qa returned non-200 status", status_code=status, body=body)

        try:
            return AnswerResult.from_dict(json.loads(body))
        except ValueError as e:
            raise UpstreamError(f"malformed table-qa response: {e}", status_code=status, body=body)
