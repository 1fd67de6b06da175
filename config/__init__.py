"""Configuration for playlist sources and sinks."""
