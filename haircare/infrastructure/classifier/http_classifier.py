from __future__ import annotations

import logging

import httpx
from pydantic import ValidationError

from haircare.application.dto.classification_response import ClassificationResponseDTO
from haircare.application.exceptions import ClassifierContractError, ClassifierUpstreamError
from haircare.application.ports.hair_classifier import HairClassifierPort
from haircare.core.config import settings
from haircare.domain.entities.classification import ClassificationResult
from haircare.domain.entities.image_upload import ImageUpload


class HttpHairClassifier(HairClassifierPort):
    """
    Remote classification adapter implementing HairClassifierPort.

    Uploads the image as multipart field "image" and decodes
    {success, result: {predicted_hair_type, confidence, confidence_percentage}, timestamp}.

    Raises:
        ClassifierUpstreamError: networking failures or HTTP status >= 400
        ClassifierContractError: invalid JSON, wrong shape, success=false or no result
    """

    def __init__(
        self,
        base_url: str | None = None,
        endpoint: str | None = None,
        timeout: float | None = None,
        client: httpx.Client | None = None,
    ) -> None:
        self._base_url = (base_url or settings.CLASSIFIER_BASE_URL or "").rstrip("/")
        self._endpoint = (endpoint or settings.CLASSIFIER_ENDPOINT).lstrip("/")
        self._client = client or httpx.Client(timeout=timeout or settings.CLASSIFIER_TIMEOUT_SECONDS)
        self._logger = logging.getLogger(__name__)

        if not self._base_url:
            raise ValueError("CLASSIFIER_BASE_URL is required for the HTTP hair classifier")

    @property
    def url(self) -> str:
        return f"{self._base_url}/{self._endpoint}"

    def classify(self, image: ImageUpload) -> ClassificationResult:
        files = {"image": (image.filename, image.content, image.content_type)}
        self._logger.debug("Uploading image for classification", extra={"image_name": image.filename})

        try:
            resp = self._client.post(self.url, files=files)
        except httpx.HTTPError as e:
            raise ClassifierUpstreamError(f"Classifier request failed: {e}") from e

        if resp.status_code >= 400:
            self._logger.error(
                "Classifier call failed",
                extra={"status": resp.status_code, "error": resp.text[:200]},
            )
            raise ClassifierUpstreamError(f"Classifier returned HTTP {resp.status_code}")

        try:
            payload = resp.json()
        except ValueError as e:
            snippet = resp.text[:200].replace("\n", " ")
            raise ClassifierContractError(f"Classifier returned invalid JSON. Snippet: {snippet!r}") from e

        try:
            dto = ClassificationResponseDTO.model_validate(payload)
        except ValidationError as e:
            raise ClassifierContractError(f"Classifier response has unexpected shape: {e}") from e

        result = dto.to_classification()
        if result is None:
            raise ClassifierContractError(f"Classifier did not return a result (success={dto.success})")

        self._logger.info(
            "Classification received",
            extra={"hair_type": result.hair_type, "confidence": result.confidence_percentage},
        )
        return result
