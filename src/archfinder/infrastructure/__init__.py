"""Infrastructure layer: type catalog adapters."""
