"""Sample assembly: unit conversion, asset encoding, fan-out and serialization."""
