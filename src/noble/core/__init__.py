"""
Core Package.

Contains the expansion logic:
- Kind transformers (function, struct, impl, enum, trait)
- Dispatcher
- Annotation handling
- Expansion Engine
"""
