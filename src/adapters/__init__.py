"""Adapters: .npmrc files and the terminal."""
