"""Domain layer: the Statist capability, Lineup and formatting helpers."""
