from __future__ import annotations

"""Base classes for configuration contracts.

Configuration contracts are immutable pydantic models. Validation failures are
surfaced as :class:`svm_engine.errors.InvalidConfiguration` so callers never
have to know about pydantic.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError

from svm_engine.errors import InvalidConfiguration


def describe_validation_error(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ())) or "<root>"
        parts.append(f"{loc}: {err.get('msg', 'invalid value')}")
    return "; ".join(parts)


class ContractModel(BaseModel):
    """Frozen, strict-keyed configuration model."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    def __init__(self, **data: Any) -> None:
        try:
            super().__init__(**data)
        except ValidationError as exc:
            raise InvalidConfiguration(
                f"{type(self).__name__}: {describe_validation_error(exc)}"
            ) from exc
