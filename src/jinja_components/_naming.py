"""Component name casing helpers.

Directory names such as ``call-to-action`` or ``call_to_action`` map to the
canonical component name ``CallToAction``. Handles written by template
authors go through the same transform, so ``button`` and ``Button`` name the
same component.
"""

import re

_WORD_SEPARATORS = re.compile(r"[-_ ]")


def _upper_first(value: str) -> str:
    return value[:1].upper() + value[1:]


def _lower_first(value: str) -> str:
    return value[:1].lower() + value[1:]


def studly(value: str) -> str:
    """Convert a value to StudlyCase.

    Dashes, underscores and spaces separate words. Each word gets an
    upper-cased first letter; the rest of the word is left untouched.

    Example:
        >>> studly("call-to-action")
        'CallToAction'
    """
    return "".join(_upper_first(word) for word in _WORD_SEPARATORS.split(value))


def camel(value: str) -> str:
    """Convert a value to camelCase.

    Example:
        >>> camel("call_to_action")
        'callToAction'
    """
    return _lower_first(studly(value))


def canonicalize(value: str) -> str:
    """Return the canonical component name for a directory name or handle.

    This is ``camel`` followed by upper-casing the first letter. The
    transform is idempotent.

    Example:
        >>> canonicalize("button")
        'Button'
        >>> canonicalize(canonicalize("icon-button"))
        'IconButton'
    """
    return _upper_first(camel(value))
