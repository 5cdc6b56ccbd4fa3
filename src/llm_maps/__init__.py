"""LLM Maps Tools: Google Maps operations exposed as HTTP tools for language models."""
