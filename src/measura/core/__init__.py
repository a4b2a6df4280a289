"""Core value types: units, quantities and the error taxonomy."""
