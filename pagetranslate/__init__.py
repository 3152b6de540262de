"""
pagetranslate - stream machine-translated web pages sentence batch by batch.

Fetches a page, extracts its block text, splits it into sentences and
streams translated batches to the browser over Server-Sent Events.
"""

__version__ = "0.1.0"
