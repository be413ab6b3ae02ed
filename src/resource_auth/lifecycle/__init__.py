"""Application lifecycle plugins (application registry, HTTP server)."""
