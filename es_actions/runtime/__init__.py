"""Runtime layer: transport and action execution."""
