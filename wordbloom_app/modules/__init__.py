"""Feature modules of WordBloom. Each package exposes a blueprint."""
