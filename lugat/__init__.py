"""
Lugat - Bilingual Dictionary Lookup

An incremental-search dictionary widget that suggests headwords as you type
and renders annotated dictionary articles into linkable rich text.
"""

__version__ = "1.0.0"
__author__ = "Lugat Contributors"
