"""bundlesplit API package."""
