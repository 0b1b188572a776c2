"""MAI metacognitive awareness survey."""

__version__ = "0.1.0"
