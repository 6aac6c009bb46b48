"""Dense float matrices with tolerance-based comparison and basic arithmetic."""

__version__ = "0.1.0"
__all__ = ["__version__"]