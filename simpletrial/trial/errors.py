"""
SimpleTrial — Configuration Errors
====================================
The only errors the library raises itself. Reconciliation has no
error path; a bad configuration is refused before it starts.
"""


class TrialConfigurationError(ValueError):
    """Raised when a trial configuration is invalid."""

    def __init__(self, field: str, detail: str):
        self.field = field
        self.detail = detail
        super().__init__(f"Invalid trial configuration — {field}: {detail}")
