"""Settings factory shared by fixtures and tests.

Builds settings without reading `.env` so the host environment cannot
change test behaviour.
"""

from __future__ import annotations

from app.core.config import Settings


def make_settings(**overrides) -> Settings:
    values = {
        "id_policy": "sequential",
        "seed_catalog": True,
        "docs_enabled": True,
        "log_level": "WARNING",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)
