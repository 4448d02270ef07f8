"""
Meme Ingestion

Fetch the meme list over HTTP and decode it into MemeRecord values.
"""
