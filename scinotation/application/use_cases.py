"""Application use cases.

Use cases apply configured defaults and hand values to the domain
dispatcher.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, List, Optional

from scinotation.config.settings import Settings
from scinotation.domain.models import ExponentStyle
from scinotation.domain.services.type_dispatcher import build_options, format_any


class FormatNumberUseCase:
    """Format one value using settings for any option left unset."""

    def __init__(self, settings: Settings) -> None:
        self._settings = settings

    def execute(
        self,
        value: Any,
        decimals: Optional[int] = None,
        locale: Any = None,
        style: ExponentStyle | str | None = None,
    ) -> str:
        """Format a value.

        Args:
            value: Any input accepted by format_any
            decimals: Mantissa decimals (settings default when None)
            locale: Locale argument (settings default when None)
            style: Exponent style (settings default when None)

        Returns:
            The formatted string
        """
        decimals = self._settings.decimals if decimals is None else decimals
        locale = self._settings.locale if locale is None else locale
        style = self._settings.style if style is None else style

        result = format_any(value, decimals=decimals, locale=locale, style=style)
        logging.debug("Formatted %r decimals=%s -> %s", value, decimals, result)
        return result


class FormatManyUseCase:
    """Format a sequence of values with shared options."""

    def __init__(self, settings: Settings) -> None:
        self._settings = settings

    def execute(
        self,
        values: Iterable[Any],
        decimals: Optional[int] = None,
        locale: Any = None,
        style: ExponentStyle | str | None = None,
    ) -> List[str]:
        """Format every value; the first invalid one raises.

        Options are validated once, before any value is formatted.
        """
        options = build_options(
            self._settings.decimals if decimals is None else decimals,
            self._settings.locale if locale is None else locale,
            self._settings.style if style is None else style,
        )
        results = [
            format_any(value, options.decimals, options.locale, options.style)
            for value in values
        ]
        logging.debug("Formatted %d values locale=%s", len(results), options.locale.name)
        return results
