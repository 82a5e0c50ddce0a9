"""Runtime settings.

The defaults are the fixed values the server has always used (port 5000,
`/graphql`, GraphiQL on). The `LIBRARY_*` environment overrides are an
extension on top of them; with none set the server behaves as before.
"""

import os

HOST = os.environ.get("LIBRARY_HOST", "0.0.0.0")
PORT = int(os.environ.get("LIBRARY_PORT", "5000"))
GRAPHQL_PATH = os.environ.get("LIBRARY_GRAPHQL_PATH", "/graphql")

# Serve the GraphiQL explorer on GRAPHQL_PATH to browsers
GRAPHIQL = os.environ.get("LIBRARY_GRAPHIQL", "true").lower() in ("1", "true", "yes")

LOG_LEVEL = os.environ.get("LIBRARY_LOG_LEVEL", "INFO").upper()
