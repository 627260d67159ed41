import unicodedata


class TextNormalizer:
    """
    Prepares console input for the cipher engines.

    Handles:
    - Unicode composition (NFC), so that a decomposed "Й" typed as
      "И" plus a combining breve reaches the engine as one letter
    - Line terminators left over from reading a line

    It never filters letters or spaces: deciding which characters are
    acceptable is the engines' job.
    """

    def normalize(self, text: str) -> str:
        """
        Normalize text for the engines.

        Args:
            text: Input text to normalize

        Returns:
            Normalized text string
        """
        # Step 1: Unicode composition
        text = unicodedata.normalize("NFC", text)

        # Step 2: Drop the line terminator of a read line
        return text.rstrip("\r\n")
