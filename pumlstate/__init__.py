"""Parse PlantUML state diagrams, transition labels and state descriptions."""

__version__ = "0.7.0"
__all__ = ["diagram", "errors", "labels"]