"""Entry point for ``python -m youareell``."""
from .client.main import app

if __name__ == "__main__":
    app()
