import importlib

from library_graphql import config


def test_defaults_without_environment(monkeypatch):
    for name in ("LIBRARY_HOST", "LIBRARY_PORT", "LIBRARY_GRAPHQL_PATH", "LIBRARY_GRAPHIQL", "LIBRARY_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    importlib.reload(config)
    assert config.PORT == 5000
    assert config.GRAPHQL_PATH == "/graphql"
    assert config.GRAPHIQL is True


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("LIBRARY_PORT", "8080")
    monkeypatch.setenv("LIBRARY_GRAPHIQL", "false")
    importlib.reload(config)
    assert config.PORT == 8080
    assert config.GRAPHIQL is False

    monkeypatch.delenv("LIBRARY_PORT")
    monkeypatch.delenv("LIBRARY_GRAPHIQL")
    importlib.reload(config)
