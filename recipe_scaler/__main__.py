"""Allow running as ``python -m recipe_scaler``."""

from .cli import main

main()
