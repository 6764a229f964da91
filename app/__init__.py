"""Election lifecycle application."""
