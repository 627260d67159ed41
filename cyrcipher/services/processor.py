import logging

from cyrcipher.core.config import Settings, get_settings
from cyrcipher.core.exceptions import InputTooLongError
from cyrcipher.models.schemas import CipherRequest, CipherResponse, Operation
from cyrcipher.services.engines.registry import EngineRegistry
from cyrcipher.services.preprocessing.normalizer import TextNormalizer

logger = logging.getLogger(__name__)


class CipherProcessor:
    """
    Runs one encrypt or decrypt request end to end.

    Steps: length limit, engine construction from the raw key, input
    normalization, the operation itself, and the response model. Any
    CipherError propagates to the caller unchanged.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        registry: EngineRegistry | None = None,
        normalizer: TextNormalizer | None = None,
    ):
        self.settings = settings or get_settings()
        self.registry = registry or EngineRegistry()
        self.normalizer = normalizer or TextNormalizer()

    def run(self, request: CipherRequest, explain: bool = False) -> CipherResponse:
        """
        Execute a request.

        Args:
            request: The validated request
            explain: Attach the engine's explanation to the response

        Returns:
            CipherResponse with the transformed text
        """
        if len(request.text) > self.settings.max_input_length:
            raise InputTooLongError(len(request.text), self.settings.max_input_length)

        engine = self.registry.create(
            request.cipher_type,
            self.normalizer.normalize(request.key),
        )
        text = self.normalizer.normalize(request.text)

        logger.info(
            "%s with %s, %d characters",
            request.operation.value,
            request.cipher_type.value,
            len(text),
        )

        if request.operation == Operation.ENCRYPT:
            output = engine.encrypt(text)
        else:
            output = engine.decrypt(text)

        return CipherResponse(
            cipher_type=request.cipher_type,
            operation=request.operation,
            key_used=engine.key_display,
            input_text=text,
            output_text=output,
            explanation=engine.explain(text, output) if explain else None,
        )
