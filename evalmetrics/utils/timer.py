"""
Timer utility for measuring execution time.
"""
import logging
import time
from typing import Optional
from .logging_utils import get_logger

logger = get_logger(__name__)


class Timer:
    """
    Context manager for timing code execution.
    
    Usage:
        with Timer("silhouette_score"):
            # code to time
    """
    
    def __init__(self, name: Optional[str] = None, log: bool = True, level: int = logging.INFO):
        """
        Initialize timer.
        
        Args:
            name: Name for the timed operation
            log: Whether to log the elapsed time
            level: Logging level used for the elapsed-time record
        """
        self.name = name or "operation"
        self.log = log
        self.level = level
        self.start_time: Optional[float] = None
        self.end_time: Optional[float] = None
        self.elapsed: Optional[float] = None
    
    def __enter__(self) -> 'Timer':
        self.start_time = time.perf_counter()
        return self
    
    def __exit__(self, *args) -> None:
        self.end_time = time.perf_counter()
        self.elapsed = self.end_time - self.start_time
        if self.log:
            logger.log(self.level, f"{self.name} completed in {self.elapsed:.4f} seconds")
