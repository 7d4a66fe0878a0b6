from abc import ABC, abstractmethod

from haircare.domain.entities.classification import ClassificationResult
from haircare.domain.entities.image_upload import ImageUpload


class HairClassifierPort(ABC):
    @abstractmethod
    def classify(self, image: ImageUpload) -> ClassificationResult:
        """
        Classify the hair type shown in an image.

        Raises:
            ClassifierUpstreamError: transport or service failures
            ClassifierContractError: response missing a result or malformed
        """
        raise NotImplementedError
