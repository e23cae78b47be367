"""Application services: flows that tie the domain to the adapters."""
