"""Command-line client for the YouAreEll message board."""
