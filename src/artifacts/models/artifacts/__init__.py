"""Record and artifact schemas."""
