"""
Factory to create stemmer instances by algorithm name.
"""

import logging
from typing import Dict, Type, Union

from ..errors import ConfigurationError
from .base import Algorithm, BaseStemmer
from .hunspell import HunspellStemmer, ModifiedHunspellStemmer
from .porter import PorterStemmer
from .rslp import RSLPStemmer

logger = logging.getLogger(__name__)


def validate_algorithm(algorithm: Union[str, Algorithm]) -> Algorithm:
    """
    Resolve an algorithm name.

    Raises:
        ConfigurationError: Unknown algorithm
    """
    try:
        return Algorithm(algorithm)
    except ValueError:
        raise ConfigurationError(
            f"Unknown stemming algorithm: {algorithm!r}. "
            f"Valid options: {', '.join(Algorithm.values())}"
        ) from None


def validate_complete(complete) -> bool:
    """
    Check that complete is a real bool (not 1, 0, None or a numpy scalar).

    Raises:
        ConfigurationError: complete is not a bool
    """
    if not isinstance(complete, bool):
        raise ConfigurationError(f"complete must be True or False, got {complete!r}")
    return complete


class StemmerFactory:
    """
    Factory to create stemmers from a registry of backends.

    A new backend is added with register(); create() never needs to change.
    Instances are not cached: each call gets a fresh backend.
    """

    _registry: Dict[Algorithm, Type[BaseStemmer]] = {
        Algorithm.HUNSPELL: HunspellStemmer,
        Algorithm.RSLP: RSLPStemmer,
        Algorithm.PORTER: PorterStemmer,
        Algorithm.MODIFIED_HUNSPELL: ModifiedHunspellStemmer,
    }

    @classmethod
    def register(cls, algorithm: Union[str, Algorithm], stemmer_cls: Type[BaseStemmer]):
        """Register (or replace) the backend class for an algorithm."""
        cls._registry[validate_algorithm(algorithm)] = stemmer_cls

    @classmethod
    def create(cls, algorithm: Union[str, Algorithm] = Algorithm.RSLP, **options) -> BaseStemmer:
        """
        Create a stemmer for the given algorithm.

        Supported algorithms:
            - hunspell: dictionary lookup (options: dictionary, language, data_dir)
            - rslp: RSLP suffix rules (no options)
            - porter: Snowball Portuguese (options: ignore_stopwords)
            - modified-hunspell: dictionary lookup with RSLP fallback (same options as hunspell)

        Args:
            algorithm: Algorithm name
            **options: Passed verbatim to the backend constructor

        Returns:
            Stemmer instance

        Raises:
            ConfigurationError: Unknown algorithm
        """
        algorithm = validate_algorithm(algorithm)
        stemmer_cls = cls._registry[algorithm]

        try:
            stemmer = stemmer_cls(**options)
        except Exception as e:
            logger.error(f"Failed to create stemmer ({algorithm.value}): {e}")
            raise

        logger.info(f"Created {algorithm.value} stemmer: {stemmer_cls.__name__}")
        return stemmer
