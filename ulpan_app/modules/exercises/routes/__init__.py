"""HTTP routes for the practice blueprint."""
