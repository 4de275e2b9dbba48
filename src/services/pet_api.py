"""
Pet API client for Pet Gallery.
Fetches the current image collection from the remote REST endpoint.
"""

import traceback
from typing import List, Optional

import requests

from constants import API_BASE_URL, PETS_ENDPOINT, REQUEST_TIMEOUT
from state import PetImage
from utils.logging import log_error


class NetworkError(Exception):
    """Base class for failures while talking to the pet API."""

    def __init__(self, detail: str = ""):
        super().__init__(detail)
        self.detail = detail


class NoConnectivity(NetworkError):
    """Host could not be resolved or reached."""


class Timeout(NetworkError):
    """The request did not complete within the configured timeout."""


class OtherNetworkError(NetworkError):
    """Any other failure: HTTP status, malformed payload, transport error."""


class PetApiClient:
    """
    Client for the pets endpoint.

    Every fetch() is a fresh remote read; there is no caching and no
    retrying. Callers decide what to do with a NetworkError.
    """

    def __init__(
        self,
        base_url: str = API_BASE_URL,
        timeout: float = REQUEST_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    @property
    def pets_url(self) -> str:
        return f"{self.base_url}{PETS_ENDPOINT}"

    def fetch(self) -> List[PetImage]:
        """
        Fetch all pet images.

        Returns:
            Images in the order the API returned them

        Raises:
            NoConnectivity: DNS or connection failure
            Timeout: request timed out
            OtherNetworkError: bad status, invalid JSON or unexpected shape
        """
        try:
            response = self.session.get(
                self.pets_url,
                headers={"Accept": "application/json"},
                timeout=self.timeout,
            )
        except requests.Timeout as e:
            raise Timeout(str(e)) from e
        except requests.ConnectionError as e:
            raise NoConnectivity(str(e)) from e
        except requests.RequestException as e:
            raise OtherNetworkError(str(e)) from e

        if response.status_code != 200:
            raise OtherNetworkError(f"HTTP {response.status_code}")

        try:
            payload = response.json()
        except ValueError as e:
            raise OtherNetworkError(f"Invalid JSON response: {e}") from e

        if not isinstance(payload, list):
            raise OtherNetworkError(
                f"Expected a list of images, got {type(payload).__name__}"
            )

        return self._parse_images(payload)

    def _parse_images(self, payload: list) -> List[PetImage]:
        """Convert JSON records, skipping the ones that can't be used."""
        images = []
        for index, item in enumerate(payload):
            try:
                images.append(PetImage.from_dict(item))
            except ValueError as e:
                log_error(
                    f"Skipping malformed image record #{index}: {e}",
                    type(e).__name__,
                    traceback.format_exc(),
                )
        return images
