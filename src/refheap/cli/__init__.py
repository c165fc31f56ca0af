from .app import app

# Register commands
from .commands import paste, config  # noqa: F401

__all__ = ['app', 'main']


def main():
    app()
