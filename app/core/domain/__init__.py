# app/core/domain/__init__.py
"""
Domain layer: enums, value objects and the exception hierarchy shared by the
morphology rules and the engine.
"""
