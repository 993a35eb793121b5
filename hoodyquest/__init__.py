"""A small top-down arcade game with sprite animation and a pixel-lighting demo."""

__version__ = "0.1.0"
__all__ = ["animation", "player", "enemy", "lighting", "game"]