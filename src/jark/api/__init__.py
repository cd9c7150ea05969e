"""JARK AI Platform — FastAPI REST API layer.

This package contains the FastAPI application, Pydantic request models, and
the prompt templates for each generation engine.

Modules
-------
main
    FastAPI application factory, route handlers, the shared engine pipeline,
    and the ``main()`` CLI entry point.
models
    Pydantic models for the engine request bodies.
prompt_builder
    Per-engine prompt templates and the language directive.
"""
