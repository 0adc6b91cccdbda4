"""Schema creation and template seeding for a fresh database."""

from __future__ import annotations

import logging

from wbcalc.persistence.database import Database
from wbcalc.persistence.repositories.profile_repo import ProfileRepository
from wbcalc.services.templates import AIRCRAFT_TEMPLATES

logger = logging.getLogger(__name__)


def seed_templates(repo: ProfileRepository) -> int:
    """Insert the built-in templates as shared profiles into an empty table.

    Returns the number of profiles created.
    """
    if repo.count():
        return 0
    for key, template in AIRCRAFT_TEMPLATES.items():
        repo.create(template)
        logger.info("Seeded aircraft template %s (%s)", key, template.name)
    return len(AIRCRAFT_TEMPLATES)


def initialize(db: Database, seed: bool = True) -> dict[str, int]:
    """Create the schema, optionally seed templates, and return record counts."""
    db.init()
    if seed:
        seed_templates(ProfileRepository(db))
    return db.get_stats()
