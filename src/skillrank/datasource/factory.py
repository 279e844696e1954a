"""Candidate source factory for creating source instances."""

from typing import Any
from loguru import logger

from .base import BaseCandidateSource
from .providers.in_memory import InMemoryCandidateSource
from .providers.json_file import JsonFileCandidateSource
from ..errors import ConfigurationError


class CandidateSourceFactory:
    """Factory for creating candidate sources based on type.

    This factory maintains a registry of available source types
    and creates instances based on string identifiers.
    """

    _registry: dict[str, type[BaseCandidateSource]] = {
        "in_memory": InMemoryCandidateSource,
        "json_file": JsonFileCandidateSource,
    }

    @classmethod
    def create(cls, source_type: str, **params: Any) -> BaseCandidateSource:
        """Create a candidate source instance by type.

        Args:
            source_type: Type identifier (e.g., "json_file")
            **params: Initialization parameters for the source

        Returns:
            Candidate source instance

        Raises:
            ConfigurationError: If source type is not registered
        """
        if source_type not in cls._registry:
            available = ", ".join(cls._registry.keys())
            raise ConfigurationError(
                f"Unknown candidate source type: {source_type}. Available: {available}",
                details={"source_type": source_type},
            )

        source_class = cls._registry[source_type]
        logger.debug(f"Creating {source_class.__name__} with params: {params}")

        return source_class(**params)

    @classmethod
    def register(cls, source_type: str, source_class: type[BaseCandidateSource]) -> None:
        """Register a new candidate source type.

        Raises:
            TypeError: If source_class does not subclass BaseCandidateSource
        """
        if not issubclass(source_class, BaseCandidateSource):
            raise TypeError(f"{source_class} must subclass BaseCandidateSource")

        cls._registry[source_type] = source_class
        logger.info(f"Registered candidate source type '{source_type}': {source_class.__name__}")

    @classmethod
    def list_types(cls) -> list[str]:
        return list(cls._registry.keys())
