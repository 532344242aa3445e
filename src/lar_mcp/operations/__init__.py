"""Tool operations, one module per backend resource."""
