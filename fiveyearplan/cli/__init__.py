"""Command-line interface for the Five-Year Plan simulation."""
