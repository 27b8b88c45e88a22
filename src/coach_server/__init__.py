"""HTTP routes for the lift coach."""
