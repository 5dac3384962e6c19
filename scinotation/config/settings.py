"""Environment-driven defaults.

Values come from the process environment, optionally seeded from a
.env file in the working directory.
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import find_dotenv, load_dotenv

from scinotation.config.constants import (
    DEFAULT_DECIMALS,
    DEFAULT_EXPONENT_STYLE,
    DEFAULT_LOCALE,
    ENV_DECIMALS,
    ENV_EXPONENT_STYLE,
    ENV_LOCALE,
)
from scinotation.domain.exceptions import InvalidInputError
from scinotation.domain.models import ExponentStyle
from scinotation.domain.services.locale_resolver import resolve_locale


@dataclass(frozen=True)
class Settings:
    """Defaults applied when a caller leaves an option unset."""

    decimals: int = DEFAULT_DECIMALS
    locale: str = DEFAULT_LOCALE
    style: ExponentStyle = ExponentStyle(DEFAULT_EXPONENT_STYLE)

    @classmethod
    def from_env(
        cls,
        environ: Optional[Mapping[str, str]] = None,
        use_dotenv: bool = True,
    ) -> "Settings":
        """Build settings from environment variables.

        Args:
            environ: Mapping to read instead of os.environ
            use_dotenv: Whether to load a .env file first (only when reading
                os.environ)

        Raises:
            InvalidInputError: If a variable holds an invalid value
        """
        if environ is None:
            if use_dotenv:
                load_dotenv(find_dotenv(usecwd=True))
            environ = os.environ

        raw_decimals = environ.get(ENV_DECIMALS, "").strip()
        if raw_decimals:
            try:
                decimals = int(raw_decimals)
            except ValueError:
                raise InvalidInputError(
                    f"{ENV_DECIMALS} must be an integer, got '{raw_decimals}'"
                ) from None
            if decimals < 0:
                raise InvalidInputError(f"{ENV_DECIMALS} cannot be negative: {decimals}")
        else:
            decimals = DEFAULT_DECIMALS

        locale = environ.get(ENV_LOCALE, "").strip() or DEFAULT_LOCALE
        resolve_locale(locale)
        style = ExponentStyle.parse(
            environ.get(ENV_EXPONENT_STYLE, "").strip() or DEFAULT_EXPONENT_STYLE
        )
        return cls(decimals=decimals, locale=locale, style=style)
