"""Sous-package CLI - commandes typer et sorties Rich."""
