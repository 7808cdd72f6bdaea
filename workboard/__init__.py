"""Work-order scheduling board engines."""
