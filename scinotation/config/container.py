"""Dependency Injection container.

Provides centralized, lazily-built instances of settings and use cases.
"""

from typing import Optional

from scinotation.application.use_cases import FormatManyUseCase, FormatNumberUseCase
from scinotation.config.settings import Settings


class Container:
    """Dependency injection container.

    Provides singleton instances of services and use cases.
    """

    def __init__(self, settings: Optional[Settings] = None) -> None:
        """Initialize container.

        Args:
            settings: Explicit settings (if None, reads from environment)
        """
        self._settings = settings

        # Lazy-initialized singletons
        self._format_number_use_case: Optional[FormatNumberUseCase] = None
        self._format_many_use_case: Optional[FormatManyUseCase] = None

    @property
    def settings(self) -> Settings:
        """Get settings, loading them from the environment on first use."""
        if self._settings is None:
            self._settings = Settings.from_env()
        return self._settings

    # Use Cases
    @property
    def format_number(self) -> FormatNumberUseCase:
        """Get format number use case."""
        if self._format_number_use_case is None:
            self._format_number_use_case = FormatNumberUseCase(self.settings)
        return self._format_number_use_case

    @property
    def format_many(self) -> FormatManyUseCase:
        """Get format many use case."""
        if self._format_many_use_case is None:
            self._format_many_use_case = FormatManyUseCase(self.settings)
        return self._format_many_use_case
