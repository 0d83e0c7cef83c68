"""Runtime pipeline: steps, graphs, checkpoint persistence."""
