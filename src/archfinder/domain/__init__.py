"""Domain layer: component model, type metadata, ports and exceptions."""
