"""
Client for the MagicQuill backend.

This module holds all communication with the MagicQuill server: prompt
guessing, background image processing and the proposed generation endpoint.

Responsibilities:
- Build the JSON payloads expected by each endpoint
- Send them over HTTP and parse the responses
- Turn transport failures and unexpected responses into MagicQuillError subclasses
"""

import json
import logging
from typing import Optional

import requests
from pydantic import ValidationError

from magicquill_client import config
from magicquill_client.errors import (EndpointNotAvailableError,
                                      MagicQuillAPIError,
                                      MagicQuillConnectionError)
from magicquill_client.schemas import (GenerateRequest, GenerateResponse,
                                       PromptGuessRequest)
from magicquill_client.utils import split_prompt

logger = logging.getLogger(__name__)


class MagicQuillClient:

    def __init__(
        self,
        base_url: str = config.MAGICQUILL_SERVER,
        timeout: float = config.REQUEST_TIMEOUT,
        session=None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.guess_prompt_url = f"{self.base_url}{config.GUESS_PROMPT_PATH}"
        self.process_background_url = f"{self.base_url}{config.PROCESS_BACKGROUND_PATH}"
        self.generate_url = f"{self.base_url}{config.GENERATE_PATH}"
        self._owns_session = session is None
        self.session = session if session is not None else requests.Session()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    def close(self):
        """Closes the HTTP session if this client created it."""
        if self._owns_session:
            self.session.close()

    def _post(self, url: str, payload):
        logger.debug(f"POST {url}")
        try:
            resp = self.session.post(url, json=payload, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            logger.error(f"Error connecting to MagicQuill at {url}: {e}")
            raise MagicQuillConnectionError(f"Error connecting to {url}: {e}") from e

        if resp.status_code in (404, 405):
            logger.error(f"Endpoint not available: {url} ({resp.status_code})")
            raise EndpointNotAvailableError(resp.status_code, f"{url} is not available: {resp.text}")
        if resp.status_code != 200:
            logger.error(f"HTTP Error from {url}: {resp.status_code} - {resp.text}")
            raise MagicQuillAPIError(resp.status_code, resp.text)
        return resp

    @staticmethod
    def _read_string(resp) -> str:
        # The string may come JSON-encoded or as raw text
        try:
            data = resp.json()
        except ValueError:
            return resp.text
        if not isinstance(data, str):
            raise MagicQuillAPIError(resp.status_code, f"Expected a string response, got: {json.dumps(data)[:200]}")
        return data

    def guess_prompt(
        self,
        original_image: str,
        add_color_image: Optional[str] = None,
        add_edge_image: Optional[str] = None,
    ) -> str:
        """
        Ask the backend to infer a prompt for the drawing.

        Returns the comma-separated prompt string as sent by the backend.
        """
        request = PromptGuessRequest(
            original_image=original_image,
            add_color_image=add_color_image,
            add_edge_image=add_edge_image,
        )
        resp = self._post(self.guess_prompt_url, request.to_payload())
        prompt = self._read_string(resp)
        logger.info(f"Guessed prompt: {prompt}")
        return prompt

    def guess_prompt_phrases(
        self,
        original_image: str,
        add_color_image: Optional[str] = None,
        add_edge_image: Optional[str] = None,
    ) -> list[str]:
        return split_prompt(self.guess_prompt(original_image, add_color_image, add_edge_image))

    def process_background_img(self, image: str) -> str:
        """Sends a background image data URI and returns the resized one."""
        resp = self._post(self.process_background_url, image)
        return self._read_string(resp)

    def generate(self, request: GenerateRequest) -> GenerateResponse:
        """
        Calls the proposed generation endpoint.

        Raises EndpointNotAvailableError when the backend does not expose it.
        """
        resp = self._post(self.generate_url, request.model_dump())
        try:
            result = GenerateResponse.model_validate(resp.json())
        except (ValueError, ValidationError) as e:
            raise MagicQuillAPIError(resp.status_code, f"Invalid generate response: {e}") from e
        logger.info(f"Generated image with seed {result.seed}")
        return result
