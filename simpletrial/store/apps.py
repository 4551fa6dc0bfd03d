"""
SimpleTrial Store - App Configuration
=======================================
Key-value table backing the DB trial factor.
"""

from django.apps import AppConfig


class SimpleTrialStoreConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "simpletrial.store"
    label = "simpletrial_store"
    verbose_name = "SimpleTrial Store"
