"""Core: configuration, domain, contracts and services. No I/O details."""
