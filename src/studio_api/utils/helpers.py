"""Utility functions for the studio API."""

from typing import List, Dict, Any
from datetime import datetime


def create_processing_metadata(
    start_time: float,
    end_time: float,
    segments: List[str],
    model_name: str,
    char_limit: int,
) -> Dict[str, Any]:
    """
    Create metadata describing one segmented translation.

    Args:
        start_time: Processing start time (timestamp)
        end_time: Processing end time (timestamp)
        segments: Segments sent to the model
        model_name: Model used for translation
        char_limit: Segment size limit in characters

    Returns:
        Metadata dictionary
    """
    processing_time = end_time - start_time

    return {
        "processing_time_seconds": round(processing_time, 2),
        "start_time": datetime.fromtimestamp(start_time).isoformat(),
        "end_time": datetime.fromtimestamp(end_time).isoformat(),
        "total_segments": len(segments),
        "segment_lengths": [len(segment) for segment in segments],
        "total_characters": sum(len(segment) for segment in segments),
        "char_limit": char_limit,
        "model_used": model_name,
    }


def format_error_response(error: Exception, context: str = "") -> Dict[str, Any]:
    """
    Format an error for API response.

    Args:
        error: The exception that occurred
        context: Additional context about where the error occurred

    Returns:
        Formatted error dictionary
    """
    return {
        "error_type": type(error).__name__,
        "error_message": str(error),
        "context": context,
        "timestamp": datetime.now().isoformat()
    }
