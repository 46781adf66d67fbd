"""
kpi_engine/errors.py
--------------------
Error taxonomy for the KPI engine.

    KPIError              : base class, subclass of ValueError
    MissingRequiredInput  : a required field is absent, None, or zero where
                            zero means "not provided"
    InvalidInput          : non-numeric or out-of-domain value

The engine raises before any computation begins; it never returns a
partially built result.
"""

from __future__ import annotations


class KPIError(ValueError):
    """Base class for every error raised by the KPI engine."""


class MissingRequiredInput(KPIError):
    def __init__(self, fields: list[str] | tuple[str, ...]):
        self.fields = tuple(fields)
        super().__init__(
            f"Missing required input parameters: {', '.join(self.fields)}"
        )


class InvalidInput(KPIError):
    def __init__(self, field: str, value: object, reason: str):
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid value for {field!r} ({value!r}): {reason}")
