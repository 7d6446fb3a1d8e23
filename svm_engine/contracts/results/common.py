from __future__ import annotations

"""Result contracts.

Results are outputs of evaluation. They hold JSON-friendly field types and
forbid unknown fields so payload drift is caught early.
"""

from pydantic import BaseModel, ConfigDict

# Labels are real numbers (integer valued for classification).
Label = float


class ResultModel(BaseModel):
    """Base class for result contracts (strict by default)."""

    model_config = ConfigDict(extra="forbid")
