from gamesuite.testing.fixtures import suite_app  # noqa: F401
