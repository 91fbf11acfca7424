# Keeps the repository root importable so tests can share ``tests.fs_mock``.
