"""
SimpleTrial Store - Trial Timestamp Entries
=============================================
One row per (namespace, name) slot. Each slot holds exactly one
64-bit epoch-millisecond value.
"""

from __future__ import annotations

from django.db import models


class TrialTimestampEntry(models.Model):
    namespace = models.CharField(max_length=128)
    name = models.CharField(max_length=128)
    value = models.BigIntegerField()
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "simpletrial_timestamps"
        ordering = ["namespace", "name", "id"]
        constraints = [
            models.UniqueConstraint(
                fields=["namespace", "name"],
                name="uq_trial_timestamp_slot",
            ),
        ]

    def __str__(self) -> str:
        return f"{self.namespace}:{self.name}={self.value}"
