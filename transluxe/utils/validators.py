"""
Validation Utilities
====================
Functions for validating input data.
"""
from typing import Tuple, Optional, List, Any
from transluxe.config import config, SUPPORTED_LANGUAGES


def validate_language(lang_code: Any) -> Tuple[bool, Optional[str]]:
    """
    Validate a language code.

    Args:
        lang_code: The language code to validate

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not lang_code:
        return False, "Language code is required"

    if not isinstance(lang_code, str) or lang_code not in SUPPORTED_LANGUAGES:
        supported = ', '.join(SUPPORTED_LANGUAGES.keys())
        return False, f"Unsupported language: {lang_code}. Supported: {supported}"

    return True, None


def validate_text(text: Any) -> Tuple[bool, Optional[str]]:
    """
    Validate input text. Empty text is valid and clears the translation.

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not isinstance(text, str):
        return False, "Text must be a string"

    max_length = config.pipeline.max_text_length
    if len(text) > max_length:
        return False, f"Text too long. Maximum length: {max_length} characters"

    return True, None


def validate_input_update(
    text: Any = None,
    source_lang: Any = None,
    target_lang: Any = None
) -> Tuple[bool, List[str]]:
    """
    Validate a partial input update. Fields left as None are not changed.

    Returns:
        Tuple of (is_valid, list_of_errors)
    """
    errors = []

    if text is not None:
        valid, error = validate_text(text)
        if not valid:
            errors.append(f"Text: {error}")

    if source_lang is not None:
        valid, error = validate_language(source_lang)
        if not valid:
            errors.append(f"Source language: {error}")

    if target_lang is not None:
        valid, error = validate_language(target_lang)
        if not valid:
            errors.append(f"Target language: {error}")

    return len(errors) == 0, errors
