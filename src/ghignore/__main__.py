"""Allow running ghignore as `python -m ghignore`."""

from .cli import main

main()
