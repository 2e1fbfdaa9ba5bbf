"""
Description Studio: rewrite Shopify product descriptions with OpenAI.
"""

__version__ = "1.0.0"
