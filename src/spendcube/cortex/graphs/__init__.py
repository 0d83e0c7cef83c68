"""LangGraph pipelines."""
