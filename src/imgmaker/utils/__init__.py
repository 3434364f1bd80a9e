from .dictionaries import (
    expand_dictionary,
    flatten_dictionary,
    merge_dictionaries,
)
from .imageutils import array_to_image, synthetic_to_sitk

__all__ = [
    "array_to_image",
    "synthetic_to_sitk",
    "flatten_dictionary",
    "expand_dictionary",
    "merge_dictionaries",
]
