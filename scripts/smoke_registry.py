# scripts/smoke_registry.py

import sys
from pathlib import Path

# Ensure project root is on the path when running this script directly
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import logging

from proposal_registry.application.proposal_service import ProposalService
from proposal_registry.config.logging import configure_logging
from proposal_registry.config.settings import get_settings
from proposal_registry.domain.exceptions import VoteError
from proposal_registry.domain.models.proposal import Choice
from proposal_registry.infrastructure.database.sql_record_store import SqlRecordStore

SMOKE_KEY = 424242
OWNER = "smoke-owner"
VOTER = "smoke-voter"


def smoke_registry():
    settings = get_settings()
    configure_logging(settings.log_level)
    store = SqlRecordStore.from_url(settings.database_url)
    service = ProposalService(store=store, logger=logging.getLogger("smoke"))

    # Re-runs overwrite the same key, so the voter can vote again
    service.create_proposal(OWNER, SMOKE_KEY, "smoke proposal", True)
    service.vote(VOTER, SMOKE_KEY, Choice.APPROVE)
    try:
        service.vote(VOTER, SMOKE_KEY, Choice.REJECT)
    except VoteError as e:
        print("Second vote rejected:", type(e).__name__)
    service.end_proposal(OWNER, SMOKE_KEY)

    print("Stored:", service.get_proposal(SMOKE_KEY))
    print("Count:", service.get_proposal_count())
    store.close()


smoke_registry()
