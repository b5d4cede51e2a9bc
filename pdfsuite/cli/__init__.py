"""Command line interface for pdfsuite."""
