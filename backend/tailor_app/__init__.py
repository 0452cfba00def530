"""Resume tailoring backend: LLM-driven resume generation and HTML rendering."""
