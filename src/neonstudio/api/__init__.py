"""Neon Studio admin images — FastAPI hosting layer.

This package contains the FastAPI application that hosts the Gradio admin
page and exposes the same page operations as a small JSON API.

Modules
-------
main
    FastAPI application with all route handlers and the ``main()`` CLI
    entry point.
models
    Pydantic models for API request and response validation.
"""
