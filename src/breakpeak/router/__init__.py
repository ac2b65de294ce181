from .BreaksRouter import router as BreaksRouter

__all__ = ["BreaksRouter"]
