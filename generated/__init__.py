"""Output of ``python -m generator``."""
