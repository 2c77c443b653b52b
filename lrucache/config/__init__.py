"""Cache configuration models."""
