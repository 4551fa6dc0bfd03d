"""
SimpleTrial Factors — Capability Protocol
===========================================
A factor is one independent source of the trial start timestamp.

Contract:
- read_timestamp() returns epoch ms, or NOT_AVAILABLE (None) when the
  factor has no usable value. It MUST NOT raise: missing storage,
  missing permission and corrupt data all map to NOT_AVAILABLE.
- persist_timestamp() is best-effort. Failures are swallowed by the
  factor and never surface to the reconciler.

Every factor implements both methods. A factor without one of the
capabilities implements it as a no-op (see BaseTrialFactor), so the
reconciler never inspects factor types.
"""

from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable

from simpletrial.time.timestamps import NOT_AVAILABLE


# ══════════════════════════════════════════════════════════════
# PROTOCOL
# ══════════════════════════════════════════════════════════════

@runtime_checkable
class TrialFactor(Protocol):
    def read_timestamp(self) -> Optional[int]:
        """Return the stored trial start (epoch ms) or NOT_AVAILABLE."""
        ...  # pragma: no cover

    def persist_timestamp(self, timestamp: int) -> None:
        """Store the trial start, swallowing any failure."""
        ...  # pragma: no cover


# ══════════════════════════════════════════════════════════════
# NO-OP BASE
# ══════════════════════════════════════════════════════════════

class BaseTrialFactor:
    """
    Factor with no capabilities: reads nothing, persists nothing.
    Subclasses override whichever side they support.
    """

    def read_timestamp(self) -> Optional[int]:
        return NOT_AVAILABLE

    def persist_timestamp(self, timestamp: int) -> None:
        return None

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
