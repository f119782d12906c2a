"""Interface shared by text analysis services."""

from abc import ABC, abstractmethod


class TextAnalysisService(ABC):
    """Abstract base class for services offering key phrases and sentiment."""

    @abstractmethod
    async def extract_key_phrases(self, language: str, text: str) -> list[str]:
        """
        Extract the salient phrases of a text.

        Args:
            language: Language code of the text (e.g. "en")
            text: Text to analyze

        Returns:
            Key phrases in the order the service returned them
        """

    @abstractmethod
    async def get_sentiment(self, language: str, text: str) -> float:
        """
        Score the overall sentiment of a text.

        Returns:
            From 0 to 1 (1 being totally positive sentiment)
        """
