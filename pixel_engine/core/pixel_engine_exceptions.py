#!/usr/bin/env python3
"""
Custom exceptions and error handling utilities for the pixel engine.

This module defines domain-specific exceptions and provides utilities
for consistent error reporting across the engine and its front ends.
"""


class PixelEngineError(Exception):
    """Base exception for all pixel engine errors"""
    pass


class OutOfBoundsError(PixelEngineError, IndexError):
    """Raised when a coordinate falls outside the buffer extents"""

    def __init__(self, x: int, y: int, width: int, height: int) -> None:
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        super().__init__(
            f"Pixel ({x}, {y}) is outside the {width}x{height} buffer"
        )


class EmptyInputError(PixelEngineError):
    """Raised when compositing is asked to work on zero images"""
    pass


class ValidationError(PixelEngineError, ValueError):
    """Raised when input validation fails"""
    pass


class InvalidColorError(ValidationError):
    """Raised when a color representation cannot be parsed"""
    pass


class FileOperationError(PixelEngineError):
    """Raised when file operations fail"""
    pass


class ImageFormatError(FileOperationError):
    """Raised when image data is invalid or unsupported"""
    pass


def format_error_message(operation: str, error: Exception) -> str:
    """
    Format an error message for user display.

    Args:
        operation: Description of the operation that failed
        error: The exception that was raised

    Returns:
        User-friendly error message
    """
    if isinstance(error, FileNotFoundError):
        return f"File not found during {operation}"
    elif isinstance(error, PermissionError):
        return f"Permission denied during {operation}"
    elif isinstance(error, MemoryError):
        return f"Out of memory during {operation}"
    elif isinstance(error, OSError) and error.errno == 28:  # No space left
        return f"Disk full - cannot complete {operation}"
    elif isinstance(error, OutOfBoundsError):
        return f"Coordinates out of range: {error}"
    elif isinstance(error, EmptyInputError):
        return f"Nothing to {operation}: {error}"
    elif isinstance(error, InvalidColorError):
        return f"Invalid color: {error}"
    elif isinstance(error, ImageFormatError):
        return f"Invalid image format: {error}"
    elif isinstance(error, ValidationError):
        return f"Invalid input: {error}"
    else:
        return f"Failed to {operation}: {error}"
