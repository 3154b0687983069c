"""Core functionality for dver."""
