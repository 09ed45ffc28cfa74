"""GraphQL schema assembly."""

from __future__ import annotations

import logging

import strawberry

from report_ledger.features.graphql.resolvers import Query

logger = logging.getLogger(__name__)

schema = strawberry.Schema(query=Query)

logger.debug("GraphQL schema created")

__all__ = ["schema"]
