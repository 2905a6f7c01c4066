"""Umi-OCR Batch Document Driver.

Automates the batch-document workflow of a locally running Umi-OCR
instance: resets its BatchDOC tab, submits a document, starts processing
and waits for the layered PDF it produces.
"""

__version__ = "0.1.0"
