"""AST analyzers feeding the AST type catalog."""
