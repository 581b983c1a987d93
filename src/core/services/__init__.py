"""Use-case orchestration on top of the Core contracts."""
