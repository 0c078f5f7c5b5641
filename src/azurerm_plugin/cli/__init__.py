"""Command line interface for the Azure resource plugin."""
