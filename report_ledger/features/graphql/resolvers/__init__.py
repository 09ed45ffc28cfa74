"""GraphQL resolvers."""

from report_ledger.features.graphql.resolvers.queries import Query

__all__ = ["Query"]
