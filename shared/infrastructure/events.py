"""
Domain event publishing.
"""
import logging
from dataclasses import asdict
from typing import List

from shared.domain import AggregateRoot, DomainEvent

logger = logging.getLogger(__name__)


def publish_domain_events(aggregate: AggregateRoot) -> List[DomainEvent]:
    """Drain the aggregate's recorded events and log each one."""
    events = aggregate.clear_domain_events()
    for event in events:
        payload = {k: v for k, v in asdict(event).items() if k not in ('event_id', 'occurred_at')}
        logger.info("%s %s", event.event_type, payload)
    return events
