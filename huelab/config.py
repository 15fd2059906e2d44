"""
Huelab Configuration
Manages environment variables and defaults for the color engine and its host.
"""
import os


class Config:
    """Configuration class for Huelab services."""

    # Logging
    LOG_LEVEL: str = os.environ.get("HUELAB_LOG_LEVEL", "INFO")

    # Engine caches
    CACHE_ENABLED: bool = bool(int(os.environ.get("HUELAB_CACHE_ENABLED", "1")))
    CACHE_SIZE_CONVERSION: int = int(os.environ.get("HUELAB_CACHE_SIZE_CONVERSION", "1000"))
    CACHE_SIZE_APPEARANCE: int = int(os.environ.get("HUELAB_CACHE_SIZE_APPEARANCE", "300"))
    CACHE_SIZE_CONTRAST: int = int(os.environ.get("HUELAB_CACHE_SIZE_CONTRAST", "300"))
    CACHE_SIZE_MEMORY: int = int(os.environ.get("HUELAB_CACHE_SIZE_MEMORY", "500"))
    CACHE_SIZE_HARMONY: int = int(os.environ.get("HUELAB_CACHE_SIZE_HARMONY", "200"))

    # Engine defaults
    DEFAULT_VIEWING: str = os.environ.get("HUELAB_DEFAULT_VIEWING", "sRGB")
    SUGGESTION_COUNT: int = int(os.environ.get("HUELAB_SUGGESTION_COUNT", "5"))

    # Viewing condition presets known to the appearance model
    VIEWING_PRESETS = ("sRGB", "print", "darkRoom")

    @classmethod
    def validate_cache_size(cls, size: int) -> bool:
        """Validate a cache layer size."""
        return 1 <= size <= 100_000

    @classmethod
    def validate_viewing(cls, name: str) -> bool:
        """Validate viewing conditions preset name."""
        return name in cls.VIEWING_PRESETS

    @classmethod
    def validate_suggestion_count(cls, count: int) -> bool:
        """Validate number of suggestions returned."""
        return 1 <= count <= 20


# Global config instance
config = Config()
