"""Core utilities shared by the syntax, model, and emitter layers."""
