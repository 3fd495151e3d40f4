"""Web API and HTML page for the odds board."""
