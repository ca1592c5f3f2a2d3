"""Text handling for weight strings."""


class TextNormalizer:
    """Splits weight strings into their number and unit tokens."""

    @staticmethod
    def tokenize(text: str) -> list[str]:
        """
        Trim and split on runs of whitespace.

        Example: '  3.5   lb ' -> ['3.5', 'lb']
        """
        return text.strip().split()

    @staticmethod
    def normalize_abbreviation(text: str) -> str:
        """
        Lowercase an abbreviation for alias lookup.

        Example: 'KG' -> 'kg'
        """
        return text.strip().lower()
