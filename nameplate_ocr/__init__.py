"""Nameplate OCR field extraction.

Locates model names, model numbers, and serial numbers in the raw
text produced by an OCR engine from equipment labels and nameplates.
"""
