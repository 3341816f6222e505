"""LangChain tools exposing the Moz API client.

This package contains:
- moz_tools: one tool per client capability plus the invoke_tool dispatcher
"""
