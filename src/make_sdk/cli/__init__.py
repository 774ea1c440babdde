"""CLI (Typer + Rich) sobre el SDK."""
