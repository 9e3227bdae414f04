"""Application layer: rendering Lineups for output."""
