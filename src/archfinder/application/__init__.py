"""Application layer: discovery engine, strategies, policies, reporters."""
