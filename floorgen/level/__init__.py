"""Room graph and room layout generation."""
