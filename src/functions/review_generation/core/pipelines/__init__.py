"""
Pipeline module for review post-processing.
"""

from .review_pipeline import ReviewPipeline, split_candidate_lines

__all__ = [
    "ReviewPipeline",
    "split_candidate_lines",
]
