"""Core: configuration, domain rules, interfaces and services."""
