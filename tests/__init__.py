"""bundlesplit test package."""
