"""PyQt6 desktop shell for Lugat."""
