import logging
from typing import Type

from cyrcipher.core.exceptions import EngineNotFoundError
from cyrcipher.models.schemas import CipherFamily, CipherType
from cyrcipher.services.engines.base import CipherEngine

logger = logging.getLogger(__name__)


class EngineRegistry:
    """
    Registry for cipher engines.

    Engines carry their key, so the registry keeps classes and builds a
    fresh instance for every key instead of caching instances.
    """

    _engines: dict[CipherType, Type[CipherEngine]] = {}

    @classmethod
    def register(cls, engine_class: Type[CipherEngine]) -> Type[CipherEngine]:
        """
        Register a cipher engine class.

        Can be used as a decorator:
            @EngineRegistry.register
            class SubstitutionCipher(CipherEngine):
                ...

        Args:
            engine_class: The engine class to register

        Returns:
            The engine class (for decorator usage)
        """
        cls._engines[engine_class.cipher_type] = engine_class
        return engine_class

    def get_engine_class(self, cipher_type: CipherType | str) -> Type[CipherEngine]:
        """
        Get the engine class for the specified cipher type.

        Raises:
            EngineNotFoundError: If the type is unknown or not registered
        """
        try:
            cipher_type = CipherType(cipher_type)
        except ValueError:
            raise EngineNotFoundError(str(cipher_type)) from None

        if cipher_type not in self._engines:
            raise EngineNotFoundError(cipher_type.value)

        return self._engines[cipher_type]

    def create(self, cipher_type: CipherType | str, raw_key: str) -> CipherEngine:
        """
        Build an engine from a raw key string.

        Args:
            cipher_type: The type of cipher
            raw_key: Key as typed by the user

        Returns:
            Engine instance holding the validated key
        """
        engine_class = self.get_engine_class(cipher_type)
        engine = engine_class(engine_class.parse_key(raw_key))
        logger.debug("Created %s engine", engine_class.cipher_type.value)
        return engine

    def get_engine_classes_by_family(self, family: CipherFamily) -> list[Type[CipherEngine]]:
        """Get all engine classes belonging to a cipher family."""
        return [
            engine_class
            for engine_class in self._engines.values()
            if engine_class.cipher_family == family
        ]

    @classmethod
    def list_registered(cls) -> list[CipherType]:
        """
        List all registered cipher types.

        Returns:
            List of registered cipher types
        """
        return list(cls._engines.keys())

    @classmethod
    def is_registered(cls, cipher_type: CipherType) -> bool:
        """
        Check if a cipher type is registered.

        Args:
            cipher_type: The cipher type to check

        Returns:
            True if registered
        """
        return cipher_type in cls._engines


# Import engines to trigger registration
def _load_engines() -> None:
    """Load all engine modules to trigger registration."""
    from cyrcipher.services.engines.polyalphabetic import gronsfeld  # noqa: F401
    from cyrcipher.services.engines.transposition import route  # noqa: F401


# Load engines when module is imported
_load_engines()
