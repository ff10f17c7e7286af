"""Wire schemas and helpers shared by the client modules."""
