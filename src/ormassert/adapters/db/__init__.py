"""Database helpers shared by the pytest plugin and the test suite."""
