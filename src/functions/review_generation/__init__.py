"""
Review Generation Function Module

Generates short, receipt-style customer reviews for a business from a text
summary or an uploaded PDF. Raw model output is cleaned line by line (list
markers, stuttered sentence endings, emoji placement) and the batch is then
filtered so only a small, evenly spread share of reviews keeps an emoji.

Key Features:
- OpenAI chat-completions generation with retry
- PDF text extraction (PyMuPDF)
- Deterministic post-processing when seeded
- Flask / Cloud Function entry point and CLI
"""

__version__ = "1.0.0"
