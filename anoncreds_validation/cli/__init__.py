from .cli import main, run

__all__ = ["main", "run"]
