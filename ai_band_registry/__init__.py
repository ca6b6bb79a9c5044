"""
AI Band Registry service.

Accepts crowd-sourced submissions of AI-generated music artists and lets an
administrator publish approved ones to the AI bands catalog.
"""

__version__ = "0.1.0"
