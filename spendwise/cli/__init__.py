"""Unified command-line interface for spendwise.

Usage:
    spendwise chat "<message>" [--currency RON]
    spendwise suggest "<message>"
    spendwise receipt <image> [--ocr-url URL]
    spendwise receipt <ocr.txt> --text
    spendwise serve [--host] [--port]
"""
