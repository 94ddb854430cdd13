"""
Front-end configuration.

Limits can be set in code or through the environment:

    ARITHEXPR_MAX_DEPTH            maximum parser nesting depth
    ARITHEXPR_MAX_INT_EXPONENT     largest integer exponent the interpreter computes

Author: arithexpr developers
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .parser.parser import DEFAULT_MAX_DEPTH, max_supported_depth
from .interpreter.interpreter import DEFAULT_MAX_INT_EXPONENT


class FrontendConfig(BaseSettings):
    """Settings shared by the lexer, parser and interpreter."""

    model_config = SettingsConfigDict(env_prefix="ARITHEXPR_", case_sensitive=False, frozen=True)

    filename: str = "<stdin>"
    max_depth: int = Field(default=DEFAULT_MAX_DEPTH, ge=1)
    max_int_exponent: int = Field(default=DEFAULT_MAX_INT_EXPONENT, ge=0)

    @field_validator("max_depth")
    @classmethod
    def _fits_call_stack(cls, value: int) -> int:
        ceiling = max_supported_depth()
        if value > ceiling:
            raise ValueError(f"max_depth must be at most {ceiling} at the current recursion limit")
        return value

    @classmethod
    def from_env(cls, **overrides) -> "FrontendConfig":
        """Build a config from ARITHEXPR_* variables; keyword overrides that are not None win."""
        return cls(**{k: v for k, v in overrides.items() if v is not None})
