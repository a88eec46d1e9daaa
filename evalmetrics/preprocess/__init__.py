"""
Preprocessing module for the metrics engine.
Contains label encoding shared by classification and clustering metrics.
"""
from .encoder import LabelEncoder, encode_labels

__all__ = [
    'LabelEncoder',
    'encode_labels',
]
