"""Swift standard library documentation knowledge base.

Corpus loading, flattening, naming and search.
"""
