import logging
from typing import Optional

from fastapi import FastAPI
from strawberry.fastapi import GraphQLRouter

from library_graphql import config
from library_graphql.schema import schema, verify_schema
from library_graphql.store import LibraryStore

logger = logging.getLogger(__name__)


def create_app(store: Optional[LibraryStore] = None) -> FastAPI:
    """Build the API around ``store``, or a freshly seeded one.

    Every request sees the same store as ``info.context["store"]``.
    """
    verify_schema(schema)
    if store is None:
        store = LibraryStore.seeded()

    async def get_context() -> dict:
        return {"store": store}

    graphql_app = GraphQLRouter(
        schema,
        context_getter=get_context,
        graphql_ide="graphiql" if config.GRAPHIQL else None,
    )

    app = FastAPI(title="Library GraphQL", version="0.1.0")
    app.state.store = store
    app.include_router(graphql_app, prefix=config.GRAPHQL_PATH)
    logger.info("GraphQL endpoint mounted at %s", config.GRAPHQL_PATH)
    return app
