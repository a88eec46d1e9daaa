"""
Label encoding for categorical metric inputs.

Class labels may be ints or strings. Each metric call encodes its
labels once into dense indices 0..k-1 in sorted order. When any input
holds strings, or the inputs disagree in dtype kind (an object-dtype
pandas Series against integer predictions, say), every input is
compared as text. Integral floats become text without the decimal
part, so 1.0 and '1' are the same label.
"""
import numpy as np
from typing import Optional, Dict, Any, List, Tuple


def _label_text(value: Any) -> str:
    if isinstance(value, (float, np.floating)) and float(value).is_integer():
        value = int(value)
    return str(value)


def _as_text(a: np.ndarray) -> np.ndarray:
    """Convert one label array to strings."""
    if a.dtype.kind in 'US':
        return a.astype(str)
    if a.dtype.kind == 'f' and np.all(np.isfinite(a)) and np.all(a == np.floor(a)):
        return a.astype(np.int64).astype(str)
    if a.dtype.kind == 'O':
        return np.array([_label_text(v) for v in a], dtype=str)
    return a.astype(str)


def _as_label_arrays(*arrays: Any) -> List[np.ndarray]:
    """Flatten label inputs to 1-D arrays sharing one comparable dtype."""
    arrays = [np.asarray(a).ravel() for a in arrays]
    kinds = {a.dtype.kind for a in arrays}
    if kinds & set('USO') and (len(kinds) > 1 or kinds & set('US')):
        arrays = [_as_text(a) for a in arrays]
    return arrays


class LabelEncoder:
    """
    Label encoder that transforms categorical values to integers.
    
    Fitting on several arrays uses the union of their labels, so a
    label seen only in predictions still gets an index.
    """
    
    def __init__(self):
        self.classes_: Optional[np.ndarray] = None
        self.fitted = False
    
    def fit(self, *arrays: Any) -> 'LabelEncoder':
        """Fit the encoder to the union of labels in the given arrays."""
        if not arrays:
            raise ValueError("fit() needs at least one label array")
        arrays = _as_label_arrays(*arrays)
        self.classes_ = np.unique(np.concatenate(arrays))
        self.fitted = True
        return self
    
    def transform(self, y: Any) -> np.ndarray:
        """Transform data to integer labels."""
        if not self.fitted:
            raise ValueError("Encoder not fitted. Call fit() first.")
        y = np.asarray(y).ravel()
        if self.classes_.dtype.kind in 'US':
            y = _as_text(y)
        indices = np.searchsorted(self.classes_, y)
        known = indices < len(self.classes_)
        known[known] = self.classes_[indices[known]] == y[known]
        if not np.all(known):
            unknown = np.unique(y[~known]).tolist()
            raise ValueError(f"Unknown labels: {unknown}")
        return indices.astype(np.intp)
    
    def fit_transform(self, y: Any) -> np.ndarray:
        """Fit and transform data."""
        self.fit(y)
        return self.transform(y)
    
    def inverse_transform(self, y: Any) -> np.ndarray:
        """Inverse transform integer labels to original values."""
        if not self.fitted:
            raise ValueError("Encoder not fitted. Call fit() first.")
        y = np.asarray(y, dtype=np.intp).ravel()
        return self.classes_[y]
    
    @property
    def n_classes(self) -> int:
        if not self.fitted:
            raise ValueError("Encoder not fitted. Call fit() first.")
        return len(self.classes_)
    
    def to_dict(self) -> Dict[str, Any]:
        """Serialize encoder to dictionary."""
        return {
            'type': 'LabelEncoder',
            'classes': self.classes_.tolist() if self.classes_ is not None else None,
            'fitted': self.fitted,
        }
    
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'LabelEncoder':
        """Deserialize encoder from dictionary."""
        encoder = cls()
        if data.get('classes') is not None:
            encoder.classes_ = np.array(data['classes'])
        encoder.fitted = data.get('fitted', False)
        return encoder


def encode_labels(y_true: Any, y_pred: Any) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Encode a (y_true, y_pred) pair against the union of their labels.
    
    Args:
        y_true: True class labels
        y_pred: Predicted class labels
    
    Returns:
        Tuple of (classes, encoded y_true, encoded y_pred)
    """
    encoder = LabelEncoder().fit(y_true, y_pred)
    return encoder.classes_, encoder.transform(y_true), encoder.transform(y_pred)
